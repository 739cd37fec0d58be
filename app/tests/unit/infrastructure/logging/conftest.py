"""Fixtures for infrastructure.logging tests."""

from unittest.mock import Mock

import pytest

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for configure_logging."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.GIT_SHA = "abc123"
    settings.is_production = False
    return settings
