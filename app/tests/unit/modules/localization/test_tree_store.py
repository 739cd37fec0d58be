"""Unit tests for the per-language translation file store."""

import xml.etree.ElementTree as ET

import pytest

from modules.localization.errors import FileSavingDisabledError
from modules.localization.models import LanguageInfo
from modules.localization.tree_store import (
    TranslationTreeStore,
    find_by_attribute,
    get_or_create,
    leaf_text,
    set_leaf,
)
from tests.factories.localization import write_language_file


@pytest.mark.unit
class TestTreeHelpers:
    """Tests for element helpers."""

    def test_get_or_create_reuses_existing_child(self):
        root = ET.Element("language")
        first = get_or_create(root, "contenttypes")
        second = get_or_create(root, "contenttypes")

        assert first is second
        assert len(root) == 1

    def test_set_leaf_upserts_text(self):
        root = ET.Element("language")
        set_leaf(root, "name", "One")
        set_leaf(root, "name", "Two")

        assert len(root.findall("name")) == 1
        assert leaf_text(root, "name") == "Two"

    def test_leaf_text_missing_returns_none(self):
        assert leaf_text(ET.Element("language"), "name") is None
        assert leaf_text(None, "name") is None

    def test_find_by_attribute_ignores_case(self):
        root = ET.fromstring('<headings><heading name="Content"/></headings>')
        assert find_by_attribute(root, "heading", "name", "content") is not None


@pytest.mark.unit
class TestTranslationTreeStore:
    """Tests for TranslationTreeStore."""

    def test_missing_file_loads_as_none(self, tmp_path):
        """Test a missing file is not an error and is not created."""
        store = TranslationTreeStore(tmp_path)

        assert store.load_document("ReGroupNames", "sv") is None
        assert not (tmp_path / "ReGroupNames_sv.xml").exists()

    def test_save_and_load_round_trip(self, tmp_path):
        store = TranslationTreeStore(tmp_path / "nested")
        root = store.create_skeleton(LanguageInfo(id="sv", name="Svenska"))
        set_leaf(get_or_create(root, "headings"), "title", "Rubrik")

        path = store.save_document(root, "ReGroupNames", "sv")
        loaded = store.load_document("ReGroupNames", "sv")

        assert path.name == "ReGroupNames_sv.xml"
        assert loaded.get("id") == "sv"
        assert loaded.get("name") == "Svenska"
        assert leaf_text(loaded, "headings/title") == "Rubrik"

    def test_save_leaves_no_temp_files(self, tmp_path):
        store = TranslationTreeStore(tmp_path)
        store.save_document(ET.Element("language"), "ReGroupNames", "en")

        assert [p.name for p in tmp_path.iterdir()] == ["ReGroupNames_en.xml"]

    def test_save_refused_when_disabled(self, tmp_path):
        store = TranslationTreeStore(tmp_path, file_saving_enabled=False)

        with pytest.raises(FileSavingDisabledError):
            store.save_document(ET.Element("language"), "ReGroupNames", "en")
        assert not (tmp_path / "ReGroupNames_en.xml").exists()

    def test_discover_keys_unions_languages_in_first_seen_order(self, tmp_path):
        write_language_file(tmp_path, "ReDisplayChannelNames", "en", "<a/><b/>")
        write_language_file(tmp_path, "ReDisplayChannelNames", "sv", "<c/><a/>")
        store = TranslationTreeStore(tmp_path)

        keys = store.discover_keys(
            "ReDisplayChannelNames", ["en", "sv", "fi"], lambda root: [c.tag for c in root]
        )

        assert keys == ["a", "b", "c"]

    def test_discover_keys_sorted(self, tmp_path):
        write_language_file(tmp_path, "ReDisplayChannelNames", "en", "<b/><a/>")
        store = TranslationTreeStore(tmp_path)

        keys = store.discover_keys(
            "ReDisplayChannelNames", ["en"], lambda root: [c.tag for c in root], sort=True
        )

        assert keys == ["a", "b"]

    def test_has_any_file(self, tmp_path):
        store = TranslationTreeStore(tmp_path)
        assert not store.has_any_file(["ReGroupNames"])

        write_language_file(tmp_path, "ReGroupNames", "en", "")

        assert store.has_any_file(["ReContentTypeNames", "ReGroupNames"])

    def test_has_any_file_missing_folder(self, tmp_path):
        assert not TranslationTreeStore(tmp_path / "missing").has_any_file(["Re"])
