"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.localization import LocalizationSettings

__all__ = [
    "LocalizationSettings",
]
