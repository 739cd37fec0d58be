"""Override records and CSV row types."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

SYSTEM_USER = "System"


class OverrideType(str, Enum):
    """Which property text an override replaces, as written to CSV."""

    CAPTION = "Caption"
    HELP_TEXT = "HelpText"
    UNKNOWN = "Unknown"


def cache_key(key: str, language: str) -> str:
    """Lookup key of an override in the read cache."""
    return f"{key}|{language}"


def override_id_for(key: str, language: str) -> str:
    """Stable id of the override for a normalized key and language.

    The id is derived from the pair so every backend upserts the same
    record for the same key and language.
    """
    return str(uuid.uuid5(uuid.NAMESPACE_URL, cache_key(key, language)))


@dataclass
class OverrideRecord:
    """A translation value that takes precedence over the translation files.

    Attributes:
        key: Normalized translation key.
        language: Lowercased language or culture code.
        value: Override text.
        content_type_name: Content type the override was created for, if any.
        modified_by: User that last saved the override.
        modified_at: UTC time of the last save.
        id: Stable record id, derived from key and language when omitted.
    """

    key: str
    language: str
    value: str
    content_type_name: Optional[str] = None
    modified_by: str = SYSTEM_USER
    modified_at: Optional[datetime] = None
    id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = override_id_for(self.key, self.language)
        if self.modified_at is None:
            self.modified_at = datetime.now(timezone.utc)

    @property
    def cache_key(self) -> str:
        return cache_key(self.key, self.language)


@dataclass(frozen=True)
class OverrideRow:
    """One row of the override CSV exchange format.

    Attributes:
        content_type: Owning content type name, "" when unknown.
        property: Property name, or the raw key for non-property overrides.
        override_type: "Caption", "HelpText" or "Unknown".
        language: Language code.
        value: Override text.
    """

    content_type: str
    property: str
    override_type: str
    language: str
    value: str


OverrideExportRow = OverrideRow
OverrideImportRow = OverrideRow
