"""Fixtures for localization module tests."""

import pytest

from modules.localization.domains import (
    ContentTypeLocalizationService,
    DisplayLocalizationService,
    EditorHintLocalizationService,
    TabLocalizationService,
    ViewLocalizationService,
)
from modules.localization.languages import LanguageService
from modules.localization.overrides import (
    InMemoryOverrideRepository,
    OverrideCache,
    OverrideService,
)
from modules.localization.tree_store import TranslationTreeStore
from tests.factories.localization import make_schema


@pytest.fixture
def translation_folder(tmp_path):
    return tmp_path / "translations"


@pytest.fixture
def schema():
    return make_schema()


@pytest.fixture
def languages(schema):
    return LanguageService(schema)


@pytest.fixture
def store(translation_folder):
    return TranslationTreeStore(translation_folder)


@pytest.fixture
def content_type_service(store, languages, schema):
    return ContentTypeLocalizationService(store, languages, schema)


@pytest.fixture
def tab_service(store, languages, schema):
    return TabLocalizationService(store, languages, schema)


@pytest.fixture
def display_service(store, languages):
    return DisplayLocalizationService(store, languages)


@pytest.fixture
def editor_hint_service(store, languages):
    return EditorHintLocalizationService(store, languages)


@pytest.fixture
def view_service(store, languages):
    return ViewLocalizationService(store, languages)


@pytest.fixture
def override_repository():
    return InMemoryOverrideRepository()


@pytest.fixture
def override_service(override_repository, languages, content_type_service):
    return OverrideService(
        override_repository,
        languages,
        cache=OverrideCache(),
        content_types=content_type_service,
    )
