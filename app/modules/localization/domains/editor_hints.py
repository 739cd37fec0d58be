"""Editor hint translations in ``ReEditorHintNames_<lang>.xml``.

Sections hold either direct leaves (``preview/heading``) or one level of
nesting (``blocks/buttonblockcontrol/buttondefaulttext``). Besides the known
sections, any other top-level section found in a file is discovered too.
"""

import xml.etree.ElementTree as ET
from typing import Dict, Iterator, List, Optional, Tuple

from modules.localization.domains.base import LocalizationDomainService
from modules.localization.models import (
    EditorHintEntry,
    EditorHintSection,
    EditorHintTranslation,
)
from modules.localization.tree_store import get_or_create, set_leaf

EDITOR_HINTS_PREFIX = "ReEditorHintNames"

KNOWN_SECTIONS = ("blocks", "preview", "renderingerror")
SECTION_DISPLAY_NAMES = {
    "blocks": "Blocks",
    "preview": "Preview",
    "renderingerror": "Rendering Errors",
}

# (section, parent key or None, key)
HintKey = Tuple[str, Optional[str], str]


def _section_keys(section: ET.Element) -> Iterator[HintKey]:
    for child in section:
        if len(child):
            for grandchild in child:
                yield section.tag, child.tag, grandchild.tag
        else:
            yield section.tag, None, child.tag


def collect_hint_keys(root: ET.Element) -> Iterator[HintKey]:
    """Yield hint keys of one document, known sections first."""
    for name in KNOWN_SECTIONS:
        section = root.find(name)
        if section is not None:
            yield from _section_keys(section)
    for section in root:
        if section.tag not in KNOWN_SECTIONS:
            yield from _section_keys(section)


def _read_hint(root: Optional[ET.Element], key: HintKey) -> Optional[str]:
    if root is None:
        return None
    section, parent, child = key
    path = f"{section}/{parent}/{child}" if parent else f"{section}/{child}"
    found = root.find(path)
    return (found.text or "") if found is not None else None


class EditorHintLocalizationService(LocalizationDomainService):
    """Reads and writes editor hint texts."""

    prefix = EDITOR_HINTS_PREFIX

    def get_translation(self) -> EditorHintTranslation:
        keys: List[HintKey] = self.discover(collect_hint_keys)
        documents = self._documents()

        sections: Dict[str, EditorHintSection] = {}
        for key in keys:
            section_name, parent, child = key
            section = sections.get(section_name)
            if section is None:
                section = EditorHintSection(
                    name=section_name,
                    display_name=SECTION_DISPLAY_NAMES.get(section_name, section_name),
                )
                sections[section_name] = section

            values = {
                language_id: _read_hint(root, key) or ""
                for language_id, root in documents.items()
            }
            entry = EditorHintEntry.loaded(child, values)
            entry.parent_key = parent
            section.entries.append(entry)

        return EditorHintTranslation(sections=list(sections.values()))

    def save(self, translation: EditorHintTranslation) -> None:
        def apply(root: ET.Element, language_id: str) -> None:
            for section in translation.sections:
                section_element = get_or_create(root, section.name)
                for entry in section.entries:
                    parent = section_element
                    if entry.parent_key:
                        parent = get_or_create(section_element, entry.parent_key)
                    set_leaf(parent, entry.key, entry.get(language_id))

        self._save_languages(apply, translation.has_content)
        translation.mark_clean()
