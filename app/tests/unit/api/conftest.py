"""Fixtures for API route tests."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.services import get_localization_services, get_settings
from modules.localization.factory import build_localization_services
from server.server import create_app
from tests.factories.localization import make_schema


@pytest.fixture
def settings(settings_factory):
    return settings_factory()


@pytest.fixture
def services(settings):
    return build_localization_services(settings, schema=make_schema())


@pytest.fixture
def app(settings, services):
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_localization_services] = lambda: services
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
