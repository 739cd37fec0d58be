"""Tests for the application lifespan."""

import pytest
from fastapi.testclient import TestClient

from server.server import create_app
from tests.factories.localization import write_legacy_file


@pytest.mark.unit
class TestLifespan:
    """Test startup wiring and the startup migration."""

    def test_state_populated_on_startup(self, patch_lifespan):
        settings, services = patch_lifespan()
        app = create_app()

        with TestClient(app):
            assert app.state.settings is settings
            assert app.state.localization is services

    def test_startup_migrates_legacy_folder(self, patch_lifespan):
        _, services = patch_lifespan()
        write_legacy_file(
            services.store.folder,
            "EditorHints.xml",
            {"en": "<preview><heading>Preview</heading></preview>"},
        )

        with TestClient(create_app()):
            pass

        assert services.store.load_document("ReEditorHintNames", "en") is not None

    def test_startup_migration_disabled(self, patch_lifespan):
        _, services = patch_lifespan(RUN_MIGRATION_ON_STARTUP=False)
        write_legacy_file(
            services.store.folder,
            "EditorHints.xml",
            {"en": "<preview><heading>Preview</heading></preview>"},
        )

        with TestClient(create_app()):
            pass

        assert services.migration.needs_migration()
