"""Free-form view text translations.

Unlike the other domains, each view file holds every language::

    <languages>
      <language name="English" id="en">
        <contact>
          <heading>Contact us</heading>
        </contact>
      </language>
    </languages>

Files are found with a glob pattern (``views_*.xml`` by default) in the
translation folder.
"""

import fnmatch
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional

from infrastructure.logging import get_module_logger
from modules.localization.domains.base import LocalizationDomainService
from modules.localization.errors import InvalidArgumentError
from modules.localization.languages import LanguageService
from modules.localization.models import (
    TranslationEntry,
    ViewFileInfo,
    ViewSection,
    ViewTranslation,
)
from modules.localization.tree_store import (
    TranslationTreeStore,
    get_or_create,
    read_tree,
    set_leaf,
)

logger = get_module_logger()

VIEWS_ROOT_TAG = "languages"


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def _language_element(root: Optional[ET.Element], language_id: str) -> Optional[ET.Element]:
    if root is None:
        return None
    for element in root.findall("language"):
        if element.get("id") == language_id:
            return element
    return None


class ViewLocalizationService(LocalizationDomainService):
    """Reads and writes multi-language view files."""

    def __init__(
        self,
        store: TranslationTreeStore,
        languages: LanguageService,
        file_pattern: str = "views_*.xml",
    ):
        super().__init__(store, languages)
        self.file_pattern = file_pattern

    def display_name_for(self, file_name: str) -> str:
        """Derive a display name: ``views_contact.xml`` becomes ``Contact``."""
        star = self.file_pattern.find("*")
        prefix = self.file_pattern[:star] if star >= 0 else ""
        name = file_name
        if name.lower().startswith(prefix.lower()):
            name = name[len(prefix):]
        if name.lower().endswith(".xml"):
            name = name[:-4]
        return _capitalize(name)

    def _path(self, file_name: str) -> Path:
        if Path(file_name).name != file_name or not fnmatch.fnmatch(
            file_name.lower(), self.file_pattern.lower()
        ):
            raise InvalidArgumentError(f"Not a view file name: {file_name}")
        return self.store.folder / file_name

    def list_view_files(self) -> List[ViewFileInfo]:
        folder = self.store.folder
        if not folder.is_dir():
            return []
        return [
            ViewFileInfo(file_name=path.name, display_name=self.display_name_for(path.name))
            for path in sorted(folder.glob(self.file_pattern))
            if path.is_file()
        ]

    def get_translation(self, file_name: str) -> ViewTranslation:
        translation = ViewTranslation(
            file_name=file_name, display_name=self.display_name_for(file_name)
        )
        root = read_tree(self._path(file_name))
        if root is None:
            return translation

        language_ids = [language.id for language in self._languages()]
        structure: Dict[str, Dict[str, None]] = {}
        for language_id in language_ids:
            language_element = _language_element(root, language_id)
            if language_element is None:
                continue
            for section in language_element:
                keys = structure.setdefault(section.tag, {})
                for child in section:
                    keys.setdefault(child.tag, None)

        for section_name, keys in structure.items():
            section = ViewSection(name=section_name, display_name=_capitalize(section_name))
            for key in keys:
                values = {}
                for language_id in language_ids:
                    found = _language_element(root, language_id)
                    leaf = found.find(f"{section_name}/{key}") if found is not None else None
                    values[language_id] = (leaf.text or "") if leaf is not None else ""
                section.entries.append(TranslationEntry.loaded(key, values))
            translation.sections.append(section)

        return translation

    def save(self, translation: ViewTranslation) -> None:
        """Write the view file, dropping sections and keys removed from the model."""
        path = self._path(translation.file_name)
        root = read_tree(path)
        if root is None:
            root = ET.Element(VIEWS_ROOT_TAG)

        section_names = {section.name for section in translation.sections}
        for language in self._languages():
            language_element = _language_element(root, language.id)
            if language_element is None:
                if not translation.has_content(language.id):
                    continue
                language_element = ET.SubElement(
                    root, "language", {"name": language.name, "id": language.id}
                )

            for section in translation.sections:
                section_element = get_or_create(language_element, section.name)
                keys = {entry.key for entry in section.entries}
                for entry in section.entries:
                    set_leaf(section_element, entry.key, entry.get(language.id))
                for stale in [e for e in section_element if e.tag not in keys]:
                    section_element.remove(stale)

            for stale in [e for e in language_element if e.tag not in section_names]:
                language_element.remove(stale)

        self.store.write(root, path)
        translation.mark_clean()
        logger.info(
            "view_translation_saved",
            file=translation.file_name,
            sections=len(translation.sections),
        )
