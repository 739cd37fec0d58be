"""Per-language translation file storage.

Each translation domain keeps one XML file per language named
``<Prefix>_<languageId>.xml`` in the translation folder. The root element is
``<language name=".." id="..">`` and its children are domain sections.

A missing file means the language has no entries for that domain. Reading
never creates files; writes replace the whole file.
"""

import os
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TypeVar

from infrastructure.logging import get_module_logger
from modules.localization.errors import FileSavingDisabledError
from modules.localization.models import LanguageInfo

logger = get_module_logger()

K = TypeVar("K")

ROOT_TAG = "language"


def get_or_create(node: ET.Element, child_name: str) -> ET.Element:
    """Return the first child named ``child_name``, appending one if absent."""
    child = node.find(child_name)
    if child is None:
        child = ET.SubElement(node, child_name)
    return child


def set_leaf(node: ET.Element, child_name: str, value: str) -> ET.Element:
    """Upsert the text of the leaf ``child_name`` under ``node``."""
    leaf = get_or_create(node, child_name)
    leaf.text = value
    return leaf


def leaf_text(node: Optional[ET.Element], path: str) -> Optional[str]:
    """Text of the element at ``path`` below ``node``, or None when absent."""
    if node is None:
        return None
    found = node.find(path)
    if found is None:
        return None
    return found.text or ""


def find_by_attribute(
    node: Optional[ET.Element], tag: str, attribute: str, value: str
) -> Optional[ET.Element]:
    """Find a child ``tag`` whose ``attribute`` equals ``value`` ignoring case."""
    if node is None:
        return None
    wanted = value.lower()
    for child in node.findall(tag):
        if (child.get(attribute) or "").lower() == wanted:
            return child
    return None


def has_element_children(node: ET.Element) -> bool:
    return len(node) > 0


def read_tree(path: Path) -> Optional[ET.Element]:
    """Parse ``path`` and return its root, or None when the file is absent.

    Raises:
        xml.etree.ElementTree.ParseError: If the file is not well formed.
    """
    if not path.is_file():
        return None
    return ET.parse(path).getroot()


def write_tree(root: ET.Element, path: Path) -> None:
    """Serialize ``root`` to ``path``, replacing the file in one step.

    The document is written to a temporary file in the target folder and
    moved over the target with ``os.replace``.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tree = ET.ElementTree(root)
    ET.indent(tree, space="  ")

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "wb") as f:
            tree.write(f, encoding="utf-8", xml_declaration=True)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class TranslationTreeStore:
    """Loads and saves per-language translation documents.

    Attributes:
        folder: Translation folder holding the XML files.
        file_saving_enabled: When False every save raises
            FileSavingDisabledError.
    """

    def __init__(self, folder: Path | str, file_saving_enabled: bool = True):
        self.folder = Path(folder)
        self.file_saving_enabled = file_saving_enabled

    def path_for(self, prefix: str, language_id: str) -> Path:
        return self.folder / f"{prefix}_{language_id}.xml"

    def load_document(self, prefix: str, language_id: str) -> Optional[ET.Element]:
        """Load the document for ``prefix`` and ``language_id``, or None."""
        return read_tree(self.path_for(prefix, language_id))

    @staticmethod
    def create_skeleton(language: LanguageInfo) -> ET.Element:
        """Return an empty document root tagged with the language's name and id."""
        return ET.Element(ROOT_TAG, {"name": language.name, "id": language.id})

    def save_document(self, root: ET.Element, prefix: str, language_id: str) -> Path:
        """Replace the file for ``prefix`` and ``language_id`` with ``root``."""
        path = self.path_for(prefix, language_id)
        self.write(root, path)
        return path

    def write(self, root: ET.Element, path: Path) -> None:
        if not self.file_saving_enabled:
            raise FileSavingDisabledError(f"File saving is disabled: {path.name}")
        write_tree(root, path)
        logger.info("translation_file_saved", file=path.name)

    def discover_keys(
        self,
        prefix: str,
        language_ids: Iterable[str],
        collect: Callable[[ET.Element], Iterable[K]],
        sort: bool = False,
    ) -> List[K]:
        """Union the keys ``collect`` yields from every language's document.

        First pass of the two-pass read: the resulting key set reflects every
        language, so a key present in only one file still shows up for all.

        Args:
            prefix: Domain file prefix.
            language_ids: Languages whose files are scanned.
            collect: Extracts keys from one document root.
            sort: Sort the union instead of keeping first-seen order.

        Returns:
            Keys in first-seen order (or sorted), without duplicates.
        """
        seen: dict = {}
        for language_id in language_ids:
            root = self.load_document(prefix, language_id)
            if root is None:
                continue
            for key in collect(root):
                seen.setdefault(key, None)
        keys = list(seen)
        return sorted(keys) if sort else keys

    def has_any_file(self, prefixes: Iterable[str]) -> bool:
        """True when the folder holds at least one ``<prefix>_*.xml`` file."""
        if not self.folder.is_dir():
            return False
        return any(
            next(self.folder.glob(f"{prefix}_*.xml"), None) is not None
            for prefix in prefixes
        )
