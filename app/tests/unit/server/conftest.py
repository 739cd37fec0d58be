"""Fixtures for server module unit tests."""

import pytest

from modules.localization.factory import build_localization_services
from server import lifespan as lifespan_module
from tests.factories.localization import make_schema


@pytest.fixture
def patch_lifespan(monkeypatch, settings_factory):
    """Factory that points the lifespan at test settings and services."""

    def _factory(**localization_overrides):
        settings = settings_factory(**localization_overrides)
        services = build_localization_services(settings, schema=make_schema())
        monkeypatch.setattr(lifespan_module, "get_settings", lambda: settings)
        monkeypatch.setattr(
            lifespan_module, "get_localization_services", lambda: services
        )
        return settings, services

    return _factory
