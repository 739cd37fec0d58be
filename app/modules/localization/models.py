"""Translation data models.

Defines the editable translation aggregates loaded from the per-language
translation files, plus the read-only descriptors of languages, content
types and tabs they are built for.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional


@dataclass(frozen=True)
class LanguageInfo:
    """An enabled content language.

    Attributes:
        id: Language id as used in file names (e.g. "en", "sv", "en-gb").
        name: Display name written to the document root.
        is_default: True for the site's default language.
    """

    id: str
    name: str
    is_default: bool = False


@dataclass
class TranslationEntry:
    """One localizable field across languages, with dirty tracking.

    Attributes:
        key: Identifier of the field within its aggregate.
        display_name: Human readable label for the field.
        values: Current value per language id.
        original_values: Snapshot of the last loaded or saved values.
    """

    key: str
    display_name: str = ""
    values: Dict[str, str] = field(default_factory=dict)
    original_values: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def loaded(
        cls, key: str, values: Dict[str, str], display_name: str = ""
    ) -> "TranslationEntry":
        """Create a clean entry from values just read from storage."""
        return cls(
            key=key,
            display_name=display_name or key,
            values=dict(values),
            original_values=dict(values),
        )

    def get(self, language_id: str) -> str:
        return self.values.get(language_id, "")

    def set(self, language_id: str, value: str) -> None:
        self.values[language_id] = value

    def has_value(self, language_id: str) -> bool:
        """True when the language has a non-empty value."""
        return bool(self.values.get(language_id))

    @property
    def is_dirty(self) -> bool:
        return self.values != self.original_values

    def mark_clean(self) -> None:
        self.original_values = dict(self.values)


@dataclass
class EditorHintEntry(TranslationEntry):
    """Editor hint value, optionally nested one level under ``parent_key``."""

    parent_key: Optional[str] = None


class ContentTypeCategory(str, Enum):
    PAGE = "page"
    BLOCK = "block"
    MEDIA = "media"


@dataclass(frozen=True)
class ContentTypeInfo:
    """Listing row for a content type."""

    id: int
    name: str
    display_name: str
    category: ContentTypeCategory
    description: Optional[str] = None


@dataclass(frozen=True)
class TabInfo:
    """Listing row for a property group (tab)."""

    id: int
    name: str
    display_name: str


@dataclass(frozen=True)
class ViewFileInfo:
    """A multi-language view text file found in the translation folder."""

    file_name: str
    display_name: str


class _Aggregate:
    """Dirty tracking shared by every translation aggregate."""

    def entries(self) -> Iterator[TranslationEntry]:
        raise NotImplementedError

    @property
    def has_changes(self) -> bool:
        return any(entry.is_dirty for entry in self.entries())

    def mark_clean(self) -> None:
        for entry in self.entries():
            entry.mark_clean()

    def has_content(self, language_id: str) -> bool:
        """True when any entry has a non-empty value for ``language_id``."""
        return any(entry.has_value(language_id) for entry in self.entries())


@dataclass
class PropertyTranslation(_Aggregate):
    """Caption (label) and help text (description) of one property."""

    property_name: str
    label: TranslationEntry
    description: TranslationEntry

    def entries(self) -> Iterator[TranslationEntry]:
        yield self.label
        yield self.description


@dataclass
class ContentTypeTranslation(_Aggregate):
    """Name, description and property texts of one content type."""

    content_type_name: str
    category: ContentTypeCategory
    name: TranslationEntry
    description: TranslationEntry
    properties: List[PropertyTranslation] = field(default_factory=list)

    def entries(self) -> Iterator[TranslationEntry]:
        yield self.name
        yield self.description
        for prop in self.properties:
            yield from prop.entries()

    def properties_have_content(self, language_id: str) -> bool:
        return any(prop.has_content(language_id) for prop in self.properties)


@dataclass
class TabTranslation(_Aggregate):
    """Display name of one tab."""

    tab_id: int
    tab_name: str
    display_name: TranslationEntry

    def entries(self) -> Iterator[TranslationEntry]:
        yield self.display_name


@dataclass
class DisplayTranslation(_Aggregate):
    """Display channel names, display option and resolution labels."""

    channels: List[TranslationEntry] = field(default_factory=list)
    options: List[TranslationEntry] = field(default_factory=list)
    resolutions: List[TranslationEntry] = field(default_factory=list)

    def entries(self) -> Iterator[TranslationEntry]:
        yield from self.channels
        yield from self.options
        yield from self.resolutions


@dataclass
class EditorHintSection:
    name: str
    display_name: str
    entries: List[EditorHintEntry] = field(default_factory=list)


@dataclass
class EditorHintTranslation(_Aggregate):
    """Editor hint texts grouped by section."""

    sections: List[EditorHintSection] = field(default_factory=list)

    def entries(self) -> Iterator[TranslationEntry]:
        for section in self.sections:
            yield from section.entries


@dataclass
class ViewSection:
    name: str
    display_name: str = ""
    entries: List[TranslationEntry] = field(default_factory=list)

    def find(self, key: str) -> Optional[TranslationEntry]:
        return next((entry for entry in self.entries if entry.key == key), None)


@dataclass
class ViewTranslation(_Aggregate):
    """Free-form view texts from one multi-language view file.

    ``structure_changed`` is set when sections or keys were added or removed,
    which makes the aggregate dirty even if no value changed.
    """

    file_name: str
    display_name: str
    sections: List[ViewSection] = field(default_factory=list)
    structure_changed: bool = False

    def entries(self) -> Iterator[TranslationEntry]:
        for section in self.sections:
            yield from section.entries

    @property
    def has_changes(self) -> bool:
        return self.structure_changed or super().has_changes

    def mark_clean(self) -> None:
        super().mark_clean()
        self.structure_changed = False

    def find_section(self, name: str) -> Optional[ViewSection]:
        return next((s for s in self.sections if s.name == name), None)

    def add_section(self, name: str) -> ViewSection:
        """Return the section ``name``, creating it when missing."""
        section = self.find_section(name)
        if section is None:
            section = ViewSection(name=name, display_name=name[:1].upper() + name[1:])
            self.sections.append(section)
            self.structure_changed = True
        return section

    def remove_section(self, name: str) -> bool:
        section = self.find_section(name)
        if section is None:
            return False
        self.sections.remove(section)
        self.structure_changed = True
        return True

    def add_entry(self, section_name: str, key: str) -> TranslationEntry:
        """Return the entry ``key`` in ``section_name``, creating both if needed."""
        section = self.add_section(section_name)
        entry = section.find(key)
        if entry is None:
            entry = TranslationEntry(key=key, display_name=key)
            section.entries.append(entry)
            self.structure_changed = True
        return entry

    def remove_entry(self, section_name: str, key: str) -> bool:
        section = self.find_section(section_name)
        entry = section.find(key) if section else None
        if entry is None:
            return False
        section.entries.remove(entry)
        self.structure_changed = True
        return True


@dataclass(frozen=True)
class MigrationProgress:
    """Progress report sent after each migration step."""

    current_step: str
    completed: int
    total: int


@dataclass
class MigrationResult:
    """Outcome of a migration run.

    Attributes:
        success: True when no step reported an error.
        files_created: Number of translation files written.
        errors: One message per failed step.
    """

    success: bool
    files_created: int
    errors: List[str] = field(default_factory=list)


class TranslationStatus(str, Enum):
    """Completeness of a translation, ordered from best to worst."""

    COMPLETE = "complete"
    PARTIAL = "partial"
    INCOMPLETE = "incomplete"

    @property
    def rank(self) -> int:
        return list(TranslationStatus).index(self)


@dataclass(frozen=True)
class TranslationStatusResult:
    """Completeness of one content type in one language.

    Attributes:
        content_type_status: Status of the name and description.
        property_total: Property units (caption and help per property).
        property_complete: Translated property units.
        property_status: Status of the property units.
        overall_status: Worse of content_type_status and property_status.
        property_items_total: Number of properties.
        property_items_complete: Properties with both units translated.
    """

    content_type_status: TranslationStatus
    property_total: int
    property_complete: int
    property_status: TranslationStatus
    overall_status: TranslationStatus
    property_items_total: int
    property_items_complete: int


@dataclass(frozen=True)
class TabStatusResult:
    status: TranslationStatus


@dataclass(frozen=True)
class LanguageStatusSummary:
    """Completeness counters of one language."""

    language_id: str
    language_name: str
    is_default: bool
    content_types_total: int = 0
    content_types_complete: int = 0
    properties_total: int = 0
    properties_complete: int = 0
    tabs_total: int = 0
    tabs_complete: int = 0
