"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() and get_localization_services() caching behavior
- Dependency override pattern for testing
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.services import (
    LocalizationServicesDep,
    SettingsDep,
    get_localization_services,
    get_settings,
)
from modules.localization.factory import LocalizationServices


@pytest.mark.unit
class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_returns_cached_instance(self):
        """get_settings() returns the same Settings instance."""
        result = get_settings()

        assert isinstance(result, Settings)
        assert get_settings() is result

    def test_cache_can_be_cleared(self):
        instance = get_settings()
        get_settings.cache_clear()

        assert get_settings() is not instance


@pytest.mark.unit
class TestGetLocalizationServices:
    """Tests for get_localization_services() provider function."""

    def test_builds_from_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CONTENT_ROOT_PATH", str(tmp_path))
        monkeypatch.setenv("OVERRIDE_BACKEND", "memory")
        monkeypatch.delenv("SCHEMA_FILE", raising=False)

        services = get_localization_services()

        assert isinstance(services, LocalizationServices)
        assert get_localization_services() is services
        assert str(services.store.folder).startswith(str(tmp_path))


@pytest.mark.unit
class TestDependencyOverridePattern:
    """Tests for FastAPI dependency override pattern."""

    def test_dependencies_can_be_overridden(self, settings_factory):
        test_settings = settings_factory()
        test_settings.GIT_SHA = "sha-1"
        app = FastAPI()

        @app.get("/check")
        def check(settings: SettingsDep, services: LocalizationServicesDep) -> dict:
            return {"sha": settings.GIT_SHA, "overrides": services.overrides_enabled}

        services = MagicMock(spec=LocalizationServices)
        services.overrides_enabled = False
        app.dependency_overrides[get_settings] = lambda: test_settings
        app.dependency_overrides[get_localization_services] = lambda: services

        response = TestClient(app).get("/check")

        assert response.json() == {"sha": "sha-1", "overrides": False}
