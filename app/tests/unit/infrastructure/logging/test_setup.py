"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest

from infrastructure.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)
from modules.localization.overrides import service


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_returns_logger(self, mock_settings):
        logger = configure_logging(settings=mock_settings)

        assert hasattr(logger, "info")
        assert hasattr(logger, "error")

    def test_suppresses_output_under_pytest(self, mock_settings):
        configure_logging(settings=mock_settings, log_level="DEBUG")

        assert logging.root.level > logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_calling_module(self):
        context = service.logger._context
        assert context["module_path"] == "modules.localization.overrides.service"
        assert context["component"] == "service"

    def test_returns_bindable_logger(self):
        logger = get_module_logger()

        assert hasattr(logger.bind(key="value"), "info")
