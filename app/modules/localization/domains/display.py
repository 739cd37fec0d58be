"""Display channel, display option and resolution translations.

``ReDisplayChannelNames_<lang>.xml``::

    <displaychannels>
      <displaychannel name="mobile"><name>Mobile</name></displaychannel>
    </displaychannels>
    <displayoptions><full>Full width</full></displayoptions>
    <resolutions><androidvertical>Android vertical (480x800)</androidvertical></resolutions>

Keys are not known up front; they are the sorted union of what every
language's file contains.
"""

import xml.etree.ElementTree as ET
from typing import Iterator, Optional, Tuple

from modules.localization.domains.base import LocalizationDomainService
from modules.localization.models import DisplayTranslation
from modules.localization.tree_store import get_or_create, leaf_text, set_leaf

DISPLAY_PREFIX = "ReDisplayChannelNames"

CHANNELS = "displaychannels"
OPTIONS = "displayoptions"
RESOLUTIONS = "resolutions"


def _channel(section: Optional[ET.Element], name: str) -> Optional[ET.Element]:
    if section is None:
        return None
    for element in section.findall("displaychannel"):
        if element.get("name") == name:
            return element
    return None


def _channel_reader(name: str):
    def read(root: Optional[ET.Element]) -> Optional[str]:
        section = root.find(CHANNELS) if root is not None else None
        return leaf_text(_channel(section, name), "name")

    return read


def _leaf_reader(path: str):
    return lambda root: leaf_text(root, path)


def _collect_channels(root: ET.Element) -> Iterator[str]:
    for element in root.findall(f"{CHANNELS}/displaychannel"):
        name = element.get("name")
        if name is not None:
            yield name


def _collect_children(section: str):
    def collect(root: ET.Element) -> Iterator[str]:
        container = root.find(section)
        if container is not None:
            for child in container:
                yield child.tag

    return collect


class DisplayLocalizationService(LocalizationDomainService):
    """Reads and writes display channel, option and resolution labels."""

    prefix = DISPLAY_PREFIX

    def discover_structure(self) -> Tuple[list, list, list]:
        """Sorted keys of channels, options and resolutions across languages."""
        return (
            self.discover(_collect_channels, sort=True),
            self.discover(_collect_children(OPTIONS), sort=True),
            self.discover(_collect_children(RESOLUTIONS), sort=True),
        )

    def get_translation(self) -> DisplayTranslation:
        channels, options, resolutions = self.discover_structure()
        documents = self._documents()

        return DisplayTranslation(
            channels=[
                self._read_entry(name, documents, _channel_reader(name))
                for name in channels
            ],
            options=[
                self._read_entry(key, documents, _leaf_reader(f"{OPTIONS}/{key}"))
                for key in options
            ],
            resolutions=[
                self._read_entry(key, documents, _leaf_reader(f"{RESOLUTIONS}/{key}"))
                for key in resolutions
            ],
        )

    def save(self, translation: DisplayTranslation) -> None:
        def apply(root: ET.Element, language_id: str) -> None:
            channels = get_or_create(root, CHANNELS)
            for entry in translation.channels:
                element = _channel(channels, entry.key)
                if element is None:
                    element = ET.SubElement(channels, "displaychannel", {"name": entry.key})
                set_leaf(element, "name", entry.get(language_id))

            options = get_or_create(root, OPTIONS)
            for entry in translation.options:
                set_leaf(options, entry.key, entry.get(language_id))

            resolutions = get_or_create(root, RESOLUTIONS)
            for entry in translation.resolutions:
                set_leaf(resolutions, entry.key, entry.get(language_id))

        self._save_languages(apply, translation.has_content)
        translation.mark_clean()
