"""Unit tests for the legacy translation file migration."""

import pytest

from modules.localization.migration import MigrationService, legacy_language_element
from modules.localization.tree_store import leaf_text, read_tree
from tests.factories.localization import write_language_file, write_legacy_file


@pytest.fixture
def migration(store, languages):
    return MigrationService(store, languages)


@pytest.fixture
def legacy_files(translation_folder):
    write_legacy_file(
        translation_folder,
        "ContentTypeNames.xml",
        {
            "en": "<contenttypes><standardpage><name>Standard page</name>"
            "<description>Basic</description>"
            "<properties><mainbody><caption>Body</caption></mainbody></properties>"
            "</standardpage></contenttypes>",
            "SV": "<contenttypes><standardpage><name>Standardsida</name>"
            "</standardpage></contenttypes>",
        },
    )
    write_legacy_file(
        translation_folder,
        "PropertyNames.xml",
        {
            "en": "<contenttypes><articlepage><properties>"
            "<mainbody><caption>Ignored duplicate</caption></mainbody>"
            "<author><help>Who wrote it</help></author>"
            "</properties></articlepage></contenttypes>",
        },
    )
    write_legacy_file(
        translation_folder,
        "GroupNames.xml",
        {
            "en": '<headings><heading name="Content">'
            "<description>Content</description></heading></headings>"
        },
    )
    write_legacy_file(
        translation_folder,
        "Display.xml",
        {"sv": "<displayoptions><full>Full bredd</full></displayoptions><junk/>"},
    )
    write_legacy_file(
        translation_folder,
        "EditorHints.xml",
        {"en": "<preview><heading>Preview</heading></preview>"},
    )


@pytest.mark.unit
class TestLegacyLanguageElement:
    """Tests for legacy_language_element()."""

    def test_matches_id_ignoring_case(self, translation_folder):
        path = write_legacy_file(translation_folder, "Display.xml", {"EN": "<x/>"})

        assert legacy_language_element(read_tree(path), "en") is not None
        assert legacy_language_element(read_tree(path), "sv") is None
        assert legacy_language_element(None, "en") is None


@pytest.mark.unit
class TestNeedsMigration:
    """Tests for needs_migration()."""

    def test_missing_folder(self, migration):
        assert not migration.needs_migration()

    @pytest.mark.usefixtures("legacy_files")
    def test_legacy_only_folder(self, migration):
        assert migration.needs_migration()

    @pytest.mark.usefixtures("legacy_files")
    def test_any_per_language_file_counts_as_migrated(self, migration, translation_folder):
        write_language_file(translation_folder, "ReEditorHintNames", "sv", "")

        assert not migration.needs_migration()


@pytest.mark.unit
class TestMigrate:
    """Tests for migrate()."""

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("legacy_files")
    async def test_splits_legacy_files(self, migration, store):
        progress = []

        result = await migration.migrate(progress.append)

        assert result.success
        assert result.errors == []
        # names en+sv, properties en+sv, groups en, display sv, hints en
        assert result.files_created == 7
        assert [p.completed for p in progress] == [1, 2, 3, 4, 5]
        assert {p.total for p in progress} == {5}
        assert progress[0].current_step == "Migrating content type names"

        names_en = store.load_document("ReContentTypeNames", "en")
        assert names_en.get("id") == "en"
        assert leaf_text(names_en, "contenttypes/standardpage/name") == "Standard page"
        assert names_en.find("contenttypes/standardpage/properties") is None
        names_sv = store.load_document("ReContentTypeNames", "sv")
        assert leaf_text(names_sv, "contenttypes/standardpage/name") == "Standardsida"

        props_en = store.load_document("RePropertyNames", "en")
        shared = "contenttypes/icontentdata/properties"
        assert leaf_text(props_en, f"{shared}/mainbody/caption") == "Body"
        assert leaf_text(props_en, f"{shared}/author/help") == "Who wrote it"
        props_sv = store.load_document("RePropertyNames", "sv")
        assert props_sv is not None
        assert len(props_sv) == 0

        assert store.load_document("ReGroupNames", "sv") is None
        display_sv = store.load_document("ReDisplayChannelNames", "sv")
        assert [child.tag for child in display_sv] == ["displayoptions"]
        hints = store.load_document("ReEditorHintNames", "en")
        assert leaf_text(hints, "preview/heading") == "Preview"
        assert not migration.needs_migration()

    @pytest.mark.asyncio
    async def test_failed_step_does_not_stop_later_steps(
        self, migration, store, translation_folder
    ):
        translation_folder.mkdir(parents=True)
        (translation_folder / "ContentTypeNames.xml").write_text("<languages><broken")
        write_legacy_file(
            translation_folder,
            "EditorHints.xml",
            {"en": "<preview><heading>Preview</heading></preview>"},
        )

        result = await migration.migrate()

        assert not result.success
        assert len(result.errors) == 2
        assert result.errors[0].startswith("Migrating content type names: ")
        assert result.errors[1].startswith("Migrating property names: ")
        assert store.load_document("ReEditorHintNames", "en") is not None

    @pytest.mark.asyncio
    async def test_no_legacy_files_writes_nothing(self, migration, translation_folder):
        translation_folder.mkdir(parents=True)

        result = await migration.migrate()

        assert result.success
        assert result.files_created == 0


@pytest.mark.unit
class TestRunStartupMigration:
    """Tests for run_startup_migration()."""

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("legacy_files")
    async def test_runs_when_needed(self, migration):
        result = await migration.run_startup_migration()

        assert result is not None
        assert result.success

    @pytest.mark.asyncio
    async def test_skipped_when_not_needed(self, migration):
        assert await migration.run_startup_migration() is None

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("legacy_files")
    async def test_skipped_when_file_saving_disabled(self, migration, store):
        store.file_saving_enabled = False

        assert await migration.run_startup_migration() is None
        assert migration.needs_migration()
