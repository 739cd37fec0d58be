"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.services.providers import get_localization_services, get_settings
from modules.localization.factory import LocalizationServices

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Localization services dependency
# Usage: services.overrides.save(...), services.migration.needs_migration(), etc.
LocalizationServicesDep = Annotated[
    LocalizationServices, Depends(get_localization_services)
]

__all__ = [
    "SettingsDep",
    "LocalizationServicesDep",
]
