"""Translation completeness scoring.

A name or caption counts as translated when it is not blank and differs
(ignoring case) from the identifier it labels; a value equal to the
identifier is treated as a placeholder. A description or help text counts
as translated when it is not blank.
"""

import threading
from typing import List, Optional, Sequence

from infrastructure.logging import get_module_logger
from modules.localization.domains.content_types import ContentTypeLocalizationService
from modules.localization.domains.tabs import TabLocalizationService
from modules.localization.languages import LanguageService
from modules.localization.models import (
    ContentTypeTranslation,
    LanguageInfo,
    LanguageStatusSummary,
    PropertyTranslation,
    TabStatusResult,
    TabTranslation,
    TranslationStatus,
    TranslationStatusResult,
)

logger = get_module_logger()

DEFAULT_GREEN_THRESHOLD = 1.0
DEFAULT_YELLOW_THRESHOLD = 0.5


def is_translated_name(value: Optional[str], identifier: str) -> bool:
    if not value or not value.strip():
        return False
    return value.lower() != identifier.lower()


def is_translated_description(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def worse_of(a: TranslationStatus, b: TranslationStatus) -> TranslationStatus:
    return a if a.rank > b.rank else b


class TranslationStatusEvaluator:
    """Scores translation aggregates for one language.

    Args:
        green_threshold: Minimum translated ratio for COMPLETE.
        yellow_threshold: Minimum translated ratio for PARTIAL.
    """

    def __init__(
        self,
        green_threshold: float = DEFAULT_GREEN_THRESHOLD,
        yellow_threshold: float = DEFAULT_YELLOW_THRESHOLD,
    ):
        self.green_threshold = green_threshold
        self.yellow_threshold = yellow_threshold

    def status_for(self, total: int, translated: int) -> TranslationStatus:
        """Map a translated/total ratio to a status; no units means COMPLETE."""
        if total == 0:
            return TranslationStatus.COMPLETE
        ratio = translated / total
        if ratio >= self.green_threshold:
            return TranslationStatus.COMPLETE
        if ratio >= self.yellow_threshold:
            return TranslationStatus.PARTIAL
        return TranslationStatus.INCOMPLETE

    def evaluate_content_type(
        self, translation: ContentTypeTranslation, language_id: str
    ) -> TranslationStatusResult:
        translated = int(
            is_translated_name(
                translation.name.get(language_id), translation.content_type_name
            )
        ) + int(is_translated_description(translation.description.get(language_id)))
        content_type_status = self.status_for(2, translated)

        property_total = len(translation.properties) * 2
        property_complete = 0
        items_complete = 0
        for prop in translation.properties:
            label_ok = is_translated_name(prop.label.get(language_id), prop.property_name)
            description_ok = is_translated_description(prop.description.get(language_id))
            property_complete += int(label_ok) + int(description_ok)
            if label_ok and description_ok:
                items_complete += 1

        property_status = self.status_for(property_total, property_complete)
        return TranslationStatusResult(
            content_type_status=content_type_status,
            property_total=property_total,
            property_complete=property_complete,
            property_status=property_status,
            overall_status=worse_of(content_type_status, property_status),
            property_items_total=len(translation.properties),
            property_items_complete=items_complete,
        )

    def evaluate_tab(self, translation: TabTranslation, language_id: str) -> TabStatusResult:
        translated = is_translated_name(
            translation.display_name.get(language_id), translation.tab_name
        )
        return TabStatusResult(
            status=TranslationStatus.COMPLETE if translated else TranslationStatus.INCOMPLETE
        )

    def property_status(
        self, prop: PropertyTranslation, language_ids: Sequence[str]
    ) -> TranslationStatus:
        """Score one property's caption and help text across ``language_ids``."""
        translated = sum(
            int(is_translated_name(prop.label.get(language_id), prop.property_name))
            + int(is_translated_description(prop.description.get(language_id)))
            for language_id in language_ids
        )
        return self.status_for(len(language_ids) * 2, translated)


class TranslationStatusService:
    """Per-language completeness summaries, cached until `invalidate`."""

    def __init__(
        self,
        languages: LanguageService,
        content_types: ContentTypeLocalizationService,
        tabs: TabLocalizationService,
        evaluator: Optional[TranslationStatusEvaluator] = None,
    ):
        self.languages = languages
        self.content_types = content_types
        self.tabs = tabs
        self.evaluator = evaluator or TranslationStatusEvaluator()
        self._lock = threading.Lock()
        self._summaries: Optional[List[LanguageStatusSummary]] = None

    def get_language_summaries(self) -> List[LanguageStatusSummary]:
        with self._lock:
            if self._summaries is None:
                self._summaries = self._compute()
            return list(self._summaries)

    def invalidate(self) -> None:
        with self._lock:
            self._summaries = None

    def _compute(self) -> List[LanguageStatusSummary]:
        content_types = [
            self.content_types.get_translation(info.name, info.category)
            for getter in (
                self.content_types.get_page_types,
                self.content_types.get_block_types,
                self.content_types.get_media_types,
            )
            for info in getter()
        ]
        tabs = self.tabs.get_all_translations()
        summaries = [
            self._summarize(language, content_types, tabs)
            for language in self.languages.get_languages()
        ]
        logger.info(
            "translation_status_computed",
            languages=len(summaries),
            content_types=len(content_types),
            tabs=len(tabs),
        )
        return summaries

    def _summarize(
        self,
        language: LanguageInfo,
        content_types: List[ContentTypeTranslation],
        tabs: List[TabTranslation],
    ) -> LanguageStatusSummary:
        content_types_complete = 0
        properties_total = 0
        properties_complete = 0
        for translation in content_types:
            result = self.evaluator.evaluate_content_type(translation, language.id)
            if result.content_type_status == TranslationStatus.COMPLETE:
                content_types_complete += 1
            properties_total += result.property_items_total
            properties_complete += result.property_items_complete

        tabs_complete = sum(
            1
            for tab in tabs
            if self.evaluator.evaluate_tab(tab, language.id).status
            == TranslationStatus.COMPLETE
        )
        return LanguageStatusSummary(
            language_id=language.id,
            language_name=language.name,
            is_default=language.is_default,
            content_types_total=len(content_types),
            content_types_complete=content_types_complete,
            properties_total=properties_total,
            properties_complete=properties_complete,
            tabs_total=len(tabs),
            tabs_complete=tabs_complete,
        )
