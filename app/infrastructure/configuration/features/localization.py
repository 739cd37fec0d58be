"""Localization feature settings."""

import os
from typing import Literal, Optional

from pydantic import Field, model_validator

from infrastructure.configuration.base import FeatureSettings


class LocalizationSettings(FeatureSettings):
    """Configuration for translation files, overrides and status reporting.

    Environment Variables:
        CONTENT_ROOT_PATH: Base directory the translation folder is relative to
        TRANSLATION_FOLDER: Folder holding per-language XML files
            (default: Resources/Translations)
        ENABLE_FILE_SAVING: Allow writes to translation files (default: True)
        ENABLE_OVERRIDES: Register the override resolution provider (default: True)
        VIEW_FILE_PATTERN: Glob for multi-language view files (default: views_*.xml)
        OVERRIDE_BACKEND: Override storage backend, memory or dynamodb
        OVERRIDE_TABLE_NAME: DynamoDB table for overrides
        OVERRIDE_CACHE_TTL_SECONDS: Sliding expiry of the override read cache
            (default: 86400 = 24h)
        STATUS_GREEN_THRESHOLD: Ratio at or above which a translation is complete
        STATUS_YELLOW_THRESHOLD: Ratio at or above which a translation is partial
        RUN_MIGRATION_ON_STARTUP: Migrate legacy files when the app starts
        SCHEMA_FILE: Optional YAML snapshot of languages, content types and tabs

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        folder = settings.localization.translation_path
        if settings.localization.ENABLE_OVERRIDES:
            # Register override provider...
        ```
    """

    CONTENT_ROOT_PATH: str = Field(default=".", alias="CONTENT_ROOT_PATH")
    TRANSLATION_FOLDER: str = Field(
        default="Resources/Translations", alias="TRANSLATION_FOLDER"
    )
    ENABLE_FILE_SAVING: bool = Field(default=True, alias="ENABLE_FILE_SAVING")
    ENABLE_OVERRIDES: bool = Field(default=True, alias="ENABLE_OVERRIDES")
    VIEW_FILE_PATTERN: str = Field(default="views_*.xml", alias="VIEW_FILE_PATTERN")

    OVERRIDE_BACKEND: Literal["memory", "dynamodb"] = Field(
        default="memory", alias="OVERRIDE_BACKEND"
    )
    OVERRIDE_TABLE_NAME: str = Field(
        default="translation_overrides", alias="OVERRIDE_TABLE_NAME"
    )
    OVERRIDE_CACHE_TTL_SECONDS: int = Field(
        default=86400, alias="OVERRIDE_CACHE_TTL_SECONDS"
    )

    STATUS_GREEN_THRESHOLD: float = Field(default=1.0, alias="STATUS_GREEN_THRESHOLD")
    STATUS_YELLOW_THRESHOLD: float = Field(
        default=0.5, alias="STATUS_YELLOW_THRESHOLD"
    )

    RUN_MIGRATION_ON_STARTUP: bool = Field(
        default=True, alias="RUN_MIGRATION_ON_STARTUP"
    )
    SCHEMA_FILE: Optional[str] = Field(default=None, alias="SCHEMA_FILE")

    @model_validator(mode="after")
    def _check_thresholds(self) -> "LocalizationSettings":
        if not 0.0 <= self.STATUS_YELLOW_THRESHOLD <= self.STATUS_GREEN_THRESHOLD:
            raise ValueError(
                "STATUS_YELLOW_THRESHOLD must be between 0 and STATUS_GREEN_THRESHOLD"
            )
        return self

    @property
    def translation_path(self) -> str:
        """Absolute-or-relative path of the translation folder."""
        return os.path.join(self.CONTENT_ROOT_PATH, self.TRANSLATION_FOLDER)
