"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LocalizationServicesDep,
    SettingsDep,
)
from infrastructure.services.providers import (
    get_localization_services,
    get_settings,
)

__all__ = [
    "SettingsDep",
    "LocalizationServicesDep",
    "get_settings",
    "get_localization_services",
]
