"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from modules.localization.factory import LocalizationServices, build_localization_services


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_localization_services() -> LocalizationServices:
    """
    Get application-scoped localization services singleton.

    Builds the translation file store, domain services, override store and
    resolution chain from application settings. Tests override this provider
    through ``app.dependency_overrides``.

    Returns:
        LocalizationServices: Cached, fully wired localization services.
    """
    return build_localization_services(get_settings())
