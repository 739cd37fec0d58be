"""Unit tests for ContentTypeLocalizationService."""

import pytest

from modules.localization.errors import FileSavingDisabledError, InvalidArgumentError
from modules.localization.models import ContentTypeCategory
from modules.localization.tree_store import leaf_text
from tests.factories.localization import write_language_file


@pytest.mark.unit
class TestContentTypeListing:
    """Tests for listing content types."""

    def test_lists_sorted_by_display_name(self, content_type_service):
        names = [info.name for info in content_type_service.list_content_types()]
        assert names == ["ArticlePage", "StandardPage"]

    def test_filters_by_category(self, content_type_service):
        assert len(content_type_service.get_page_types()) == 2
        assert content_type_service.get_block_types() == []
        assert content_type_service.get_media_types() == []


@pytest.mark.unit
class TestContentTypeTranslation:
    """Tests for reading and saving content type translations."""

    def test_reads_names_and_properties(self, content_type_service, translation_folder):
        write_language_file(
            translation_folder,
            "ReContentTypeNames",
            "en",
            "<contenttypes><standardpage><name>Standard page</name>"
            "<description>Basic page</description></standardpage></contenttypes>",
        )
        write_language_file(
            translation_folder,
            "RePropertyNames",
            "sv",
            "<contenttypes>"
            "<standardpage><properties><mainbody><caption>Brödtext</caption></mainbody></properties></standardpage>"
            "<icontentdata><properties><heading><help>Rubrikhjälp</help></heading></properties></icontentdata>"
            "</contenttypes>",
            name="Svenska",
        )

        translation = content_type_service.get_translation("StandardPage")

        assert translation.name.get("en") == "Standard page"
        assert translation.name.get("sv") == ""
        assert translation.description.get("en") == "Basic page"
        assert [p.property_name for p in translation.properties] == ["Heading", "MainBody"]
        heading, main_body = translation.properties
        assert heading.description.get("sv") == "Rubrikhjälp"
        assert main_body.label.get("sv") == "Brödtext"
        assert not translation.has_changes

    def test_type_specific_property_wins_over_shared(
        self, content_type_service, translation_folder
    ):
        write_language_file(
            translation_folder,
            "RePropertyNames",
            "en",
            "<contenttypes>"
            "<icontentdata><properties><mainbody><caption>Shared</caption></mainbody></properties></icontentdata>"
            "<standardpage><properties><mainbody><caption>Specific</caption></mainbody></properties></standardpage>"
            "</contenttypes>",
        )

        translation = content_type_service.get_translation("StandardPage")

        assert translation.properties[1].label.get("en") == "Specific"

    def test_unknown_type_has_no_properties(self, content_type_service):
        translation = content_type_service.get_translation(
            "MissingType", ContentTypeCategory.BLOCK
        )

        assert translation.properties == []
        assert translation.category == ContentTypeCategory.BLOCK

    def test_save_writes_shared_section_and_skips_empty_languages(
        self, content_type_service, store, translation_folder
    ):
        translation = content_type_service.get_translation("StandardPage")
        translation.name.set("en", "Standard page")
        translation.properties[1].label.set("en", "Main body")
        assert translation.has_changes

        content_type_service.save(translation)

        assert not translation.has_changes
        names = store.load_document("ReContentTypeNames", "en")
        assert leaf_text(names, "contenttypes/standardpage/name") == "Standard page"
        props = store.load_document("RePropertyNames", "en")
        assert (
            leaf_text(props, "contenttypes/icontentdata/properties/mainbody/caption")
            == "Main body"
        )
        assert not (translation_folder / "ReContentTypeNames_sv.xml").exists()
        assert not (translation_folder / "RePropertyNames_sv.xml").exists()

    def test_save_then_read_round_trip(self, content_type_service):
        translation = content_type_service.get_translation("ArticlePage")
        translation.description.set("sv", "Artikel")
        translation.properties[0].description.set("sv", "Författare")

        content_type_service.save(translation)
        reloaded = content_type_service.get_translation("ArticlePage")

        assert reloaded.description.get("sv") == "Artikel"
        assert reloaded.properties[0].description.get("sv") == "Författare"

    def test_save_refused_when_saving_disabled(self, content_type_service, store):
        store.file_saving_enabled = False
        translation = content_type_service.get_translation("StandardPage")
        translation.name.set("en", "x")

        with pytest.raises(FileSavingDisabledError):
            content_type_service.save(translation)


@pytest.mark.unit
class TestSaveProperty:
    """Tests for save_property()."""

    def test_writes_caption_and_keeps_existing_help(
        self, content_type_service, store, translation_folder
    ):
        write_language_file(
            translation_folder,
            "RePropertyNames",
            "en",
            "<contenttypes><icontentdata><properties><mainbody>"
            "<caption>Old</caption><help>Keep me</help>"
            "</mainbody></properties></icontentdata></contenttypes>",
        )

        content_type_service.save_property("MainBody", "en", caption="New")

        root = store.load_document("RePropertyNames", "en")
        base = "contenttypes/icontentdata/properties/mainbody"
        assert leaf_text(root, f"{base}/caption") == "New"
        assert leaf_text(root, f"{base}/help") == "Keep me"

    def test_creates_file_for_language(self, content_type_service, store):
        content_type_service.save_property("Author", "SV", help_text="Vem skrev")

        root = store.load_document("RePropertyNames", "sv")
        assert root.get("name") == "Svenska"
        assert (
            leaf_text(root, "contenttypes/icontentdata/properties/author/help")
            == "Vem skrev"
        )

    def test_unknown_language_rejected(self, content_type_service):
        with pytest.raises(InvalidArgumentError):
            content_type_service.save_property("Author", "fi", caption="x")
