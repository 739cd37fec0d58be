"""Read-only schema collaborators.

Languages, content types and tabs are owned by the content platform. The
localization layer only reads them through the protocols below. An in-memory
implementation serves tests and deployments that describe their schema in a
YAML snapshot file.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

import yaml

from infrastructure.logging import get_module_logger
from modules.localization.models import ContentTypeCategory

logger = get_module_logger()


@dataclass(frozen=True)
class LanguageBranch:
    language_id: str
    name: str
    enabled: bool = True


@dataclass(frozen=True)
class ContentTypeDefinition:
    """A content type and the names of its properties."""

    id: int
    name: str
    category: ContentTypeCategory = ContentTypeCategory.PAGE
    display_name: Optional[str] = None
    description: Optional[str] = None
    properties: tuple = ()


@dataclass(frozen=True)
class TabDefinition:
    id: int
    name: str
    display_name: Optional[str] = None


class LanguageBranchRepository(Protocol):
    def list_enabled(self) -> List[LanguageBranch]:
        """Return the enabled language branches."""
        ...


class ContentTypeRepository(Protocol):
    def list_content_types(self) -> List[ContentTypeDefinition]:
        """Return every content type with its property names."""
        ...

    def get_content_type(self, name: str) -> Optional[ContentTypeDefinition]:
        """Return a content type by name (case-insensitive), or None."""
        ...


class TabRepository(Protocol):
    def list_tabs(self) -> List[TabDefinition]:
        """Return every tab."""
        ...


@dataclass
class InMemorySchemaRepository:
    """In-memory implementation of all three schema collaborators."""

    languages: List[LanguageBranch] = field(default_factory=list)
    content_types: List[ContentTypeDefinition] = field(default_factory=list)
    tabs: List[TabDefinition] = field(default_factory=list)

    def list_enabled(self) -> List[LanguageBranch]:
        return [language for language in self.languages if language.enabled]

    def list_content_types(self) -> List[ContentTypeDefinition]:
        return list(self.content_types)

    def get_content_type(self, name: str) -> Optional[ContentTypeDefinition]:
        wanted = name.lower()
        for content_type in self.content_types:
            if content_type.name.lower() == wanted:
                return content_type
        return None

    def list_tabs(self) -> List[TabDefinition]:
        return list(self.tabs)


def _parse_content_type(index: int, raw: Dict[str, Any]) -> ContentTypeDefinition:
    return ContentTypeDefinition(
        id=int(raw.get("id", index)),
        name=raw["name"],
        category=ContentTypeCategory(raw.get("category", "page")),
        display_name=raw.get("display_name"),
        description=raw.get("description"),
        properties=tuple(raw.get("properties") or ()),
    )


def load_schema_snapshot(path: Path | str) -> InMemorySchemaRepository:
    """Load languages, content types and tabs from a YAML snapshot.

    Expected layout::

        languages:
          - {id: en, name: English}
          - {id: sv, name: Svenska, enabled: false}
        content_types:
          - name: StandardPage
            category: page
            properties: [MainBody, Heading]
        tabs:
          - name: Content

    Args:
        path: Path to the YAML file.

    Returns:
        InMemorySchemaRepository with the snapshot's contents.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping or lacks required names.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Schema snapshot must be a mapping: {path}")

    try:
        languages = [
            LanguageBranch(
                language_id=str(raw["id"]),
                name=raw.get("name", str(raw["id"])),
                enabled=bool(raw.get("enabled", True)),
            )
            for raw in data.get("languages") or []
        ]
        content_types = [
            _parse_content_type(index, raw)
            for index, raw in enumerate(data.get("content_types") or [], start=1)
        ]
        tabs = [
            TabDefinition(
                id=int(raw.get("id", index)),
                name=raw["name"],
                display_name=raw.get("display_name"),
            )
            for index, raw in enumerate(data.get("tabs") or [], start=1)
        ]
    except KeyError as e:
        raise ValueError(f"Schema snapshot entry missing {e}: {path}") from e

    logger.info(
        "schema_snapshot_loaded",
        path=str(path),
        languages=len(languages),
        content_types=len(content_types),
        tabs=len(tabs),
    )
    return InMemorySchemaRepository(
        languages=languages, content_types=content_types, tabs=tabs
    )
