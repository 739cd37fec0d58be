"""Per-domain translation services backed by the translation tree store."""

from modules.localization.domains.base import LocalizationDomainService
from modules.localization.domains.content_types import (
    CONTENT_TYPE_NAMES_PREFIX,
    PROPERTY_NAMES_PREFIX,
    ContentTypeLocalizationService,
)
from modules.localization.domains.display import (
    DISPLAY_PREFIX,
    DisplayLocalizationService,
)
from modules.localization.domains.editor_hints import (
    EDITOR_HINTS_PREFIX,
    EditorHintLocalizationService,
)
from modules.localization.domains.tabs import GROUP_NAMES_PREFIX, TabLocalizationService
from modules.localization.domains.views import ViewLocalizationService

DOMAIN_PREFIXES = (
    CONTENT_TYPE_NAMES_PREFIX,
    PROPERTY_NAMES_PREFIX,
    GROUP_NAMES_PREFIX,
    DISPLAY_PREFIX,
    EDITOR_HINTS_PREFIX,
)

__all__ = [
    "DOMAIN_PREFIXES",
    "CONTENT_TYPE_NAMES_PREFIX",
    "PROPERTY_NAMES_PREFIX",
    "GROUP_NAMES_PREFIX",
    "DISPLAY_PREFIX",
    "EDITOR_HINTS_PREFIX",
    "LocalizationDomainService",
    "ContentTypeLocalizationService",
    "TabLocalizationService",
    "DisplayLocalizationService",
    "EditorHintLocalizationService",
    "ViewLocalizationService",
]
