"""Shared test fixtures."""

import pytest

from infrastructure.configuration import AwsSettings, LocalizationSettings, Settings
from infrastructure.logging import clear_request_context
from infrastructure.services import get_localization_services, get_settings


@pytest.fixture(autouse=True)
def _reset_request_context():
    """Keep request-bound logging context from leaking between tests."""
    clear_request_context()
    yield
    clear_request_context()


@pytest.fixture
def settings_factory(tmp_path):
    """Factory for Settings pointing at a temporary translation folder."""

    def _factory(**localization_overrides) -> Settings:
        values = {
            "CONTENT_ROOT_PATH": str(tmp_path),
            "TRANSLATION_FOLDER": "translations",
            "OVERRIDE_BACKEND": "memory",
        }
        values.update(localization_overrides)
        return Settings(
            aws=AwsSettings(AWS_REGION="ca-central-1"),
            localization=LocalizationSettings(**values),
        )

    return _factory


@pytest.fixture(autouse=True)
def _clear_provider_caches():
    get_settings.cache_clear()
    get_localization_services.cache_clear()
    yield
    get_settings.cache_clear()
    get_localization_services.cache_clear()
