"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the translation
service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    AwsSettings: AWS integration settings class
    LocalizationSettings: Localization feature settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    aws_region = settings.aws.AWS_REGION
    overrides_enabled = settings.localization.ENABLE_OVERRIDES
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import AwsSettings
from infrastructure.configuration.features import LocalizationSettings

__all__ = ["Settings", "AwsSettings", "LocalizationSettings"]
