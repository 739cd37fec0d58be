"""Override store service.

Overrides are translation values kept outside the translation files. They
win over file values during resolution. Reads go through an injected
`OverrideCache`; every write invalidates the cache after it commits.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from infrastructure.logging import get_current_user, get_module_logger
from modules.localization.domains.content_types import ContentTypeLocalizationService
from modules.localization.errors import InvalidArgumentError
from modules.localization.keys import (
    CAPTION,
    HELP,
    normalize_key,
    property_key,
    split_key,
)
from modules.localization.languages import LanguageService
from modules.localization.overrides.cache import OverrideCache
from modules.localization.overrides.models import (
    SYSTEM_USER,
    OverrideRecord,
    OverrideRow,
    OverrideType,
    cache_key,
)
from modules.localization.overrides.repository import OverrideRepository

logger = get_module_logger()


def override_type_for(key: str) -> OverrideType:
    if key.endswith("/" + CAPTION):
        return OverrideType.CAPTION
    if key.endswith("/" + HELP):
        return OverrideType.HELP_TEXT
    return OverrideType.UNKNOWN


def property_name_for(key: str) -> str:
    """Property name of a caption/help key, or the key itself otherwise."""
    segments = split_key(key)
    if len(segments) >= 5 and segments[-1] in (CAPTION, HELP):
        return segments[-2]
    return key


def field_for(override_type: str) -> str:
    """``Caption`` (any case) maps to the caption field, anything else to help."""
    return CAPTION if override_type.lower() == OverrideType.CAPTION.value.lower() else HELP


class OverrideService:
    """Reads and writes translation overrides.

    Args:
        repository: Persistent override storage.
        languages: Enabled languages, used to validate writes.
        cache: Read cache; a private 24 hour cache is created when omitted.
        content_types: Content type service, required by `promote_to_file`.
    """

    def __init__(
        self,
        repository: OverrideRepository,
        languages: LanguageService,
        cache: Optional[OverrideCache] = None,
        content_types: Optional[ContentTypeLocalizationService] = None,
    ):
        self.repository = repository
        self.languages = languages
        self.cache = cache or OverrideCache()
        self.content_types = content_types

    def get(self, key: str, language: str) -> Optional[str]:
        """Cached lookup of one override value.

        Args:
            key: Translation key in any case, with or without slashes.
            language: Language or culture code in any case.

        Returns:
            The override value, or None when there is no override.
        """
        if not key or not language:
            return None
        snapshot = self.cache.get_or_load(self.repository.list_all)
        record = snapshot.get(cache_key(normalize_key(key), language.lower()))
        return record.value if record else None

    def get_all(self) -> List[OverrideRecord]:
        return sorted(
            self.repository.list_all(), key=lambda r: (r.key, r.language)
        )

    def get_by_language(self, language: str) -> List[OverrideRecord]:
        wanted = language.lower()
        return [record for record in self.get_all() if record.language == wanted]

    def _validate(self, key: str, language: str) -> None:
        if not key or not key.strip("/ "):
            raise InvalidArgumentError("Override key must not be empty")
        if not self.languages.is_known(language):
            raise InvalidArgumentError(f"Unknown language '{language}'")

    def save(
        self,
        key: str,
        language: str,
        value: str,
        content_type_name: Optional[str] = None,
    ) -> OverrideRecord:
        """Create or replace the override for ``key`` and ``language``.

        Raises:
            InvalidArgumentError: If the key is empty or the language is not
                an enabled language (or a regional variant of one).
        """
        self._validate(key, language)
        record = self._upsert(key, language, value, content_type_name)
        self.cache.invalidate()
        logger.info(
            "override_saved",
            key=record.key,
            language=record.language,
            modified_by=record.modified_by,
        )
        return record

    def _upsert(
        self, key: str, language: str, value: str, content_type_name: Optional[str]
    ) -> OverrideRecord:
        return self.repository.upsert(
            OverrideRecord(
                key=normalize_key(key),
                language=language.lower(),
                value=value,
                content_type_name=content_type_name,
                modified_by=get_current_user() or SYSTEM_USER,
                modified_at=datetime.now(timezone.utc),
            )
        )

    def delete(self, key: str, language: str) -> bool:
        deleted = self.repository.delete(normalize_key(key), language.lower())
        if deleted:
            self.cache.invalidate()
            logger.info("override_deleted", key=normalize_key(key), language=language)
        return deleted

    def delete_by_id(self, override_id: str) -> bool:
        deleted = self.repository.delete_by_id(override_id)
        if deleted:
            self.cache.invalidate()
            logger.info("override_deleted", override_id=override_id)
        return deleted

    def delete_all(self) -> int:
        count = self.repository.delete_all()
        if count:
            self.cache.invalidate()
        logger.warning("overrides_deleted_all", count=count)
        return count

    def invalidate_cache(self) -> None:
        self.cache.invalidate()

    def export(self) -> List[OverrideRow]:
        """Describe every override as a CSV exchange row."""
        return [
            OverrideRow(
                content_type=record.content_type_name or "",
                property=property_name_for(record.key),
                override_type=override_type_for(record.key).value,
                language=record.language,
                value=record.value,
            )
            for record in self.get_all()
        ]

    def import_rows(self, rows: Iterable[OverrideRow]) -> int:
        """Upsert shared property overrides from exchange rows.

        Every row is validated before anything is written, so an unknown
        language aborts the whole import.

        Returns:
            Number of overrides written.

        Raises:
            InvalidArgumentError: If a row has no property or an unknown language.
        """
        rows = list(rows)
        for row in rows:
            if not row.property:
                raise InvalidArgumentError("Import row has no property name")
            if not self.languages.is_known(row.language):
                raise InvalidArgumentError(f"Unknown language '{row.language}'")

        for row in rows:
            self._upsert(
                property_key(row.property, field_for(row.override_type)),
                row.language,
                row.value,
                row.content_type or None,
            )
        self.cache.invalidate()
        logger.info("overrides_imported", count=len(rows))
        return len(rows)

    def promote_to_file(self, property_name: str, language: str) -> int:
        """Move a shared property's overrides into the property names file.

        The caption and help overrides of ``property_name`` are written to
        ``RePropertyNames_<language>.xml`` and then deleted.

        Returns:
            Number of overrides moved.

        Raises:
            InvalidArgumentError: If ``language`` is not an enabled language.
            RuntimeError: If the service was built without a content type service.
        """
        if self.content_types is None:
            raise RuntimeError("promote_to_file requires a content type service")

        code = language.lower()
        caption = self.repository.get(property_key(property_name, CAPTION), code)
        help_text = self.repository.get(property_key(property_name, HELP), code)
        moved = [record for record in (caption, help_text) if record is not None]
        if not moved:
            return 0

        self.content_types.save_property(
            property_name,
            language,
            caption=caption.value if caption else None,
            help_text=help_text.value if help_text else None,
        )
        for record in moved:
            self.repository.delete_by_id(record.id)
        self.cache.invalidate()
        logger.info(
            "overrides_promoted_to_file",
            property=property_name,
            language=code,
            count=len(moved),
        )
        return len(moved)
