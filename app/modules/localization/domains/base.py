"""Shared read/save loop for per-language translation domains."""

import xml.etree.ElementTree as ET
from typing import Callable, ClassVar, Dict, List, Optional

from infrastructure.logging import get_module_logger
from modules.localization.languages import LanguageService
from modules.localization.models import LanguageInfo, TranslationEntry
from modules.localization.tree_store import TranslationTreeStore

logger = get_module_logger()

ApplyFn = Callable[[ET.Element, str], None]
HasContentFn = Callable[[str], bool]


class LocalizationDomainService:
    """Base class for services backed by one ``<prefix>_<lang>.xml`` family.

    Subclasses set ``prefix`` and describe how their sections are read and
    written. The save policy lives here: a language without an existing file
    is skipped when the aggregate has nothing to write for it.
    """

    prefix: ClassVar[str] = ""

    def __init__(self, store: TranslationTreeStore, languages: LanguageService):
        self.store = store
        self.languages = languages

    def _languages(self) -> List[LanguageInfo]:
        return self.languages.get_languages()

    def _documents(self, prefix: Optional[str] = None) -> Dict[str, Optional[ET.Element]]:
        """Load the document of every enabled language (None when absent)."""
        prefix = prefix or self.prefix
        return {
            language.id: self.store.load_document(prefix, language.id)
            for language in self._languages()
        }

    def discover(self, collect, sort: bool = False) -> list:
        return self.store.discover_keys(
            self.prefix, [language.id for language in self._languages()], collect, sort
        )

    @staticmethod
    def _read_entry(
        key: str,
        documents: Dict[str, Optional[ET.Element]],
        read: Callable[[Optional[ET.Element]], Optional[str]],
        display_name: str = "",
    ) -> TranslationEntry:
        """Second pass of the read: fill one entry's value per language."""
        values = {
            language_id: read(root) or "" for language_id, root in documents.items()
        }
        return TranslationEntry.loaded(key, values, display_name)

    def _save_languages(
        self,
        apply: ApplyFn,
        has_content: HasContentFn,
        prefix: Optional[str] = None,
    ) -> int:
        """Apply leaf updates to every language's document and persist it.

        Args:
            apply: Writes the aggregate's values for one language into a root.
            has_content: Whether the aggregate has non-empty values for a language.
            prefix: File prefix, defaults to the service's own.

        Returns:
            Number of files written.
        """
        prefix = prefix or self.prefix
        written = 0
        for language in self._languages():
            root = self.store.load_document(prefix, language.id)
            if root is None:
                if not has_content(language.id):
                    continue
                root = self.store.create_skeleton(language)
            apply(root, language.id)
            self.store.save_document(root, prefix, language.id)
            written += 1

        logger.info("translation_domain_saved", prefix=prefix, files_written=written)
        return written
