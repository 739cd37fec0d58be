"""One-time migration from legacy monolithic translation files.

Legacy files hold every language in one document::

    <languages>
      <language name="English" id="en">
        <contenttypes>...</contenttypes>
      </language>
      <language name="Svenska" id="sv">...</language>
    </languages>

The migration splits them into the per-language files read by the domain
services. Steps run in order and a failing step does not stop the ones after
it; whatever was written stays written.
"""

import asyncio
import copy
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from infrastructure.logging import get_module_logger
from modules.localization.domains import (
    CONTENT_TYPE_NAMES_PREFIX,
    DISPLAY_PREFIX,
    DOMAIN_PREFIXES,
    EDITOR_HINTS_PREFIX,
    GROUP_NAMES_PREFIX,
    PROPERTY_NAMES_PREFIX,
)
from modules.localization.domains.content_types import shared_properties_element
from modules.localization.errors import LocalizationError
from modules.localization.languages import LanguageService
from modules.localization.models import LanguageInfo, MigrationProgress, MigrationResult
from modules.localization.tree_store import (
    TranslationTreeStore,
    find_by_attribute,
    read_tree,
)

logger = get_module_logger()

LEGACY_CONTENT_TYPE_NAMES = "ContentTypeNames.xml"
LEGACY_PROPERTY_NAMES = "PropertyNames.xml"
LEGACY_GROUP_NAMES = "GroupNames.xml"
LEGACY_DISPLAY = "Display.xml"
LEGACY_EDITOR_HINTS = "EditorHints.xml"

ProgressCallback = Callable[[MigrationProgress], None]


@dataclass(frozen=True)
class _Step:
    label: str
    run: Callable[[List[LanguageInfo]], int]


def legacy_language_element(
    document: Optional[ET.Element], language_id: str
) -> Optional[ET.Element]:
    """The ``<language id>`` sub-root for ``language_id``, ignoring case."""
    return find_by_attribute(document, "language", "id", language_id)


def _copy_children(source: ET.Element, target: ET.Element, names: Sequence[str]) -> None:
    for name in names:
        element = source.find(name)
        if element is not None:
            target.append(copy.deepcopy(element))


class MigrationService:
    """Migrates legacy translation files to the per-language layout.

    Args:
        store: Translation file store; its folder holds both layouts.
        languages: Enabled languages to migrate.
    """

    def __init__(self, store: TranslationTreeStore, languages: LanguageService):
        self.store = store
        self.languages = languages

    def needs_migration(self) -> bool:
        """True when the folder exists and holds no per-language file yet.

        A single per-language file of any domain counts as migrated.
        """
        if not self.store.folder.is_dir():
            return False
        return not self.store.has_any_file(DOMAIN_PREFIXES)

    def _legacy(self, file_name: str) -> Optional[ET.Element]:
        return read_tree(self.store.folder / file_name)

    def _steps(self) -> List[_Step]:
        return [
            _Step("Migrating content type names", self._migrate_content_type_names),
            _Step("Migrating property names", self._migrate_property_names),
            _Step("Migrating group names", self._migrate_group_names),
            _Step("Migrating display channel names", self._migrate_display),
            _Step("Migrating editor hint names", self._migrate_editor_hints),
        ]

    async def migrate(
        self, progress: Optional[ProgressCallback] = None
    ) -> MigrationResult:
        """Run every step and report progress after each one.

        Callers check `needs_migration` first; running it on a migrated
        folder rewrites the per-language files from the legacy ones.

        Args:
            progress: Called with a MigrationProgress after each step.

        Returns:
            MigrationResult with the number of files written and step errors.
        """
        languages = self.languages.get_languages()
        steps = self._steps()
        errors: List[str] = []
        files_created = 0

        logger.info("translation_migration_started", languages=len(languages))
        for index, step in enumerate(steps, start=1):
            try:
                files_created += await asyncio.to_thread(step.run, languages)
            except (OSError, ET.ParseError, LocalizationError) as e:
                logger.error(
                    "translation_migration_step_failed", step=step.label, error=str(e)
                )
                errors.append(f"{step.label}: {e}")
            if progress is not None:
                progress(MigrationProgress(step.label, index, len(steps)))

        result = MigrationResult(
            success=not errors, files_created=files_created, errors=errors
        )
        logger.info(
            "translation_migration_finished",
            success=result.success,
            files_created=files_created,
            errors=len(errors),
        )
        return result

    def _copy_per_language(
        self,
        source: Optional[ET.Element],
        prefix: str,
        languages: List[LanguageInfo],
        fill: Callable[[ET.Element, ET.Element], None],
    ) -> int:
        if source is None:
            return 0
        written = 0
        for language in languages:
            legacy = legacy_language_element(source, language.id)
            if legacy is None:
                continue
            root = self.store.create_skeleton(language)
            fill(legacy, root)
            self.store.save_document(root, prefix, language.id)
            written += 1
        return written

    def _migrate_content_type_names(self, languages: List[LanguageInfo]) -> int:
        def fill(legacy: ET.Element, root: ET.Element) -> None:
            content_types = legacy.find("contenttypes")
            if content_types is None:
                return
            target = ET.SubElement(root, "contenttypes")
            for content_type in content_types:
                element = ET.SubElement(target, content_type.tag)
                _copy_children(content_type, element, ("name", "description"))

        return self._copy_per_language(
            self._legacy(LEGACY_CONTENT_TYPE_NAMES),
            CONTENT_TYPE_NAMES_PREFIX,
            languages,
            fill,
        )

    def _migrate_property_names(self, languages: List[LanguageInfo]) -> int:
        sources = [
            document
            for document in (
                self._legacy(LEGACY_CONTENT_TYPE_NAMES),
                self._legacy(LEGACY_PROPERTY_NAMES),
            )
            if document is not None
        ]
        if not sources:
            return 0

        written = 0
        for language in languages:
            root = self.store.create_skeleton(language)
            collected = ET.Element("root")
            properties = shared_properties_element(collected)
            for source in sources:
                legacy = legacy_language_element(source, language.id)
                content_types = legacy.find("contenttypes") if legacy is not None else None
                if content_types is None:
                    continue
                for content_type in content_types:
                    for prop in content_type.findall("properties/*"):
                        if properties.find(prop.tag) is None:
                            properties.append(copy.deepcopy(prop))

            if len(properties):
                root.append(collected.find("contenttypes"))
            self.store.save_document(root, PROPERTY_NAMES_PREFIX, language.id)
            written += 1
        return written

    def _migrate_group_names(self, languages: List[LanguageInfo]) -> int:
        return self._copy_per_language(
            self._legacy(LEGACY_GROUP_NAMES),
            GROUP_NAMES_PREFIX,
            languages,
            lambda legacy, root: _copy_children(
                legacy, root, ("headings", "propertygroupsettings")
            ),
        )

    def _migrate_display(self, languages: List[LanguageInfo]) -> int:
        return self._copy_per_language(
            self._legacy(LEGACY_DISPLAY),
            DISPLAY_PREFIX,
            languages,
            lambda legacy, root: _copy_children(
                legacy, root, ("displaychannels", "displayoptions", "resolutions")
            ),
        )

    def _migrate_editor_hints(self, languages: List[LanguageInfo]) -> int:
        def fill(legacy: ET.Element, root: ET.Element) -> None:
            for child in legacy:
                root.append(copy.deepcopy(child))

        return self._copy_per_language(
            self._legacy(LEGACY_EDITOR_HINTS), EDITOR_HINTS_PREFIX, languages, fill
        )

    async def run_startup_migration(self) -> Optional[MigrationResult]:
        """Migrate once at startup when the folder still has the legacy layout.

        Returns:
            The MigrationResult, or None when nothing needed migrating or
            file saving is disabled.
        """
        if not self.needs_migration():
            logger.info("translation_migration_not_needed", folder=str(self.store.folder))
            return None
        if not self.store.file_saving_enabled:
            logger.warning(
                "translation_migration_skipped_file_saving_disabled",
                folder=str(self.store.folder),
            )
            return None
        return await self.migrate()
