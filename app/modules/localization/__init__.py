"""Localization resolution and persistence.

Main components:
- keys: translation key helpers
- tree_store: per-language XML translation files
- domains: content type, tab, display, editor hint and view services
- overrides: override store, cache and CSV exchange
- providers: resolution chain providers
- migration: legacy file migration
- status: translation completeness
- factory: composition root
"""

from modules.localization.factory import (
    LocalizationServices,
    build_localization_services,
)

__all__ = ["LocalizationServices", "build_localization_services"]
