"""Localization providers for the host resolution chain.

`OverrideLocalizationProvider` answers from the override store and is
registered ahead of `TreeFileLocalizationProvider`, which answers from the
per-language translation files. Both return None to defer to the next
provider.
"""

import threading
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, Tuple

from infrastructure.i18n import Culture, LocalizationChain
from infrastructure.logging import get_module_logger
from modules.localization.domains import DOMAIN_PREFIXES
from modules.localization.keys import derive_shared_fallback_key, is_property_key, join_key
from modules.localization.overrides import OverrideService
from modules.localization.tree_store import TranslationTreeStore, read_tree

logger = get_module_logger()

OVERRIDE_PROVIDER_PRIORITY = 10
TREE_FILE_PROVIDER_PRIORITY = 100

Lookup = Callable[[Sequence[str], str], Optional[str]]


def resolve_with_fallback(
    lookup: Lookup, segments: Sequence[str], culture: Culture
) -> Optional[str]:
    """Try the culture, then its primary language, then the shared-fallback key.

    Args:
        lookup: Finds a value for key segments and a language code.
        segments: Lowercased key segments.
        culture: Requested culture.

    Returns:
        The first value found, or None.
    """

    def by_culture(key_segments: Sequence[str]) -> Optional[str]:
        value = lookup(key_segments, culture.name)
        if value is None and culture.has_region:
            value = lookup(key_segments, culture.language)
        return value

    value = by_culture(segments)
    if value is None and is_property_key(segments):
        value = by_culture(derive_shared_fallback_key(segments))
        if value is not None:
            logger.debug(
                "localization_shared_fallback_used",
                key=join_key(segments),
                culture=culture.name,
            )
    return value


class OverrideLocalizationProvider:
    """Resolves keys from the override store."""

    def __init__(self, overrides: OverrideService):
        self.overrides = overrides

    def get_string(
        self, original_key: str, normalized_key: Sequence[str], culture: Culture
    ) -> Optional[str]:
        return resolve_with_fallback(
            lambda segments, language: self.overrides.get(join_key(segments), language),
            normalized_key,
            culture,
        )


class TreeFileLocalizationProvider:
    """Resolves keys as element paths in the translation files.

    Every domain file of the language is searched in turn. Parsed documents
    are kept until the file's modification time changes.
    """

    def __init__(
        self, store: TranslationTreeStore, prefixes: Sequence[str] = DOMAIN_PREFIXES
    ):
        self.store = store
        self.prefixes = tuple(prefixes)
        self._documents: Dict[Path, Tuple[int, Optional[ET.Element]]] = {}
        self._lock = threading.Lock()

    def _load(self, path: Path) -> Optional[ET.Element]:
        try:
            mtime = path.stat().st_mtime_ns
        except FileNotFoundError:
            return None
        with self._lock:
            cached = self._documents.get(path)
        if cached is not None and cached[0] == mtime:
            return cached[1]
        root = read_tree(path)
        with self._lock:
            self._documents[path] = (mtime, root)
        return root

    def _lookup(self, segments: Sequence[str], language: str) -> Optional[str]:
        for prefix in self.prefixes:
            node = self._load(self.store.path_for(prefix, language))
            for segment in segments:
                if node is None:
                    break
                node = next((child for child in node if child.tag == segment), None)
            if node is not None and len(node) == 0 and node.text and node.text.strip():
                return node.text
        return None

    def get_string(
        self, original_key: str, normalized_key: Sequence[str], culture: Culture
    ) -> Optional[str]:
        if not normalized_key:
            return None
        return resolve_with_fallback(self._lookup, normalized_key, culture)


def register_providers(
    chain: LocalizationChain,
    tree_provider: TreeFileLocalizationProvider,
    override_provider: Optional[OverrideLocalizationProvider] = None,
) -> None:
    """Register the tree file provider and, when given, the override provider ahead of it."""
    chain.register(tree_provider, TREE_FILE_PROVIDER_PRIORITY)
    if override_provider is not None:
        chain.register(override_provider, OVERRIDE_PROVIDER_PRIORITY)
