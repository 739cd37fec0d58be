"""Enabled language lookup."""

from typing import List, Optional

from modules.localization.models import LanguageInfo
from modules.localization.schema import LanguageBranchRepository

DEFAULT_LANGUAGE_ID = "en"
DEFAULT_LANGUAGE_NAME = "English"


class LanguageService:
    """Lists enabled languages, default first.

    The default language is ``en`` when it is enabled, otherwise the first
    enabled branch.
    """

    def __init__(self, repository: LanguageBranchRepository):
        self._repository = repository

    def get_languages(self) -> List[LanguageInfo]:
        branches = self._repository.list_enabled()
        if not branches:
            return []

        default_id = next(
            (
                b.language_id
                for b in branches
                if b.language_id.lower() == DEFAULT_LANGUAGE_ID
            ),
            branches[0].language_id,
        )
        languages = [
            LanguageInfo(
                id=b.language_id, name=b.name, is_default=b.language_id == default_id
            )
            for b in branches
        ]
        return sorted(languages, key=lambda lang: (not lang.is_default, lang.name))

    def get_language_ids(self) -> List[str]:
        return [language.id for language in self.get_languages()]

    def get_default_language(self) -> LanguageInfo:
        for language in self.get_languages():
            if language.is_default:
                return language
        return LanguageInfo(
            id=DEFAULT_LANGUAGE_ID, name=DEFAULT_LANGUAGE_NAME, is_default=True
        )

    def find(self, language_id: str) -> Optional[LanguageInfo]:
        """Find an enabled language by id, case-insensitively."""
        wanted = language_id.lower()
        for language in self.get_languages():
            if language.id.lower() == wanted:
                return language
        return None

    def is_known(self, language_code: str) -> bool:
        """True for an enabled language id or a regional variant of one.

        ``en-us`` is known when ``en`` is enabled.
        """
        if not language_code:
            return False
        code = language_code.lower()
        ids = {language_id.lower() for language_id in self.get_language_ids()}
        return code in ids or code.split("-")[0] in ids
