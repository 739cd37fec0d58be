"""Tab (property group) translations in ``ReGroupNames_<lang>.xml``.

Two layouts are read::

    <headings><heading name="Content"><description>Innehåll</description></heading></headings>
    <propertygroupsettings><content><caption>Innehåll</caption></content></propertygroupsettings>

``headings`` wins when both exist. Saving always writes ``headings``.
"""

import xml.etree.ElementTree as ET
from typing import List, Optional

from modules.localization.domains.base import LocalizationDomainService
from modules.localization.languages import LanguageService
from modules.localization.models import TabInfo, TabTranslation
from modules.localization.schema import TabRepository
from modules.localization.tree_store import (
    TranslationTreeStore,
    find_by_attribute,
    get_or_create,
    leaf_text,
    set_leaf,
)

GROUP_NAMES_PREFIX = "ReGroupNames"


def read_tab_value(root: Optional[ET.Element], tab_name: str) -> str:
    """Read a tab's display name from one language document."""
    if root is None:
        return ""
    heading = find_by_attribute(root.find("headings"), "heading", "name", tab_name)
    if heading is not None:
        description = heading.find("description")
        if description is not None:
            return description.text or ""
        return (heading.text or "").strip()

    group_key = tab_name.lower().replace(" ", "")
    return leaf_text(root, f"propertygroupsettings/{group_key}/caption") or ""


class TabLocalizationService(LocalizationDomainService):
    """Reads and writes tab display names."""

    prefix = GROUP_NAMES_PREFIX

    def __init__(
        self,
        store: TranslationTreeStore,
        languages: LanguageService,
        tabs: TabRepository,
    ):
        super().__init__(store, languages)
        self.tabs = tabs

    def get_tabs(self) -> List[TabInfo]:
        """List tabs sorted by display name."""
        return sorted(
            (
                TabInfo(id=tab.id, name=tab.name, display_name=tab.display_name or tab.name)
                for tab in self.tabs.list_tabs()
            ),
            key=lambda tab: tab.display_name,
        )

    def get_translation(self, tab_name: str) -> TabTranslation:
        tab = next((t for t in self.tabs.list_tabs() if t.name == tab_name), None)
        documents = self._documents()
        return TabTranslation(
            tab_id=tab.id if tab else 0,
            tab_name=tab_name,
            display_name=self._read_entry(
                tab_name,
                documents,
                lambda root: read_tab_value(root, tab_name),
                "Display name",
            ),
        )

    def get_all_translations(self) -> List[TabTranslation]:
        return [self.get_translation(tab.name) for tab in self.get_tabs()]

    def save(self, translation: TabTranslation) -> None:
        def apply(root: ET.Element, language_id: str) -> None:
            headings = get_or_create(root, "headings")
            heading = find_by_attribute(headings, "heading", "name", translation.tab_name)
            if heading is None:
                heading = ET.SubElement(headings, "heading", {"name": translation.tab_name})
            set_leaf(heading, "description", translation.display_name.get(language_id))

        self._save_languages(apply, translation.display_name.has_value)
        translation.mark_clean()
