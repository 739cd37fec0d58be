from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_localization_services, get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from modules.localization.factory import LocalizationServices


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


async def _run_startup_migration(
    services: "LocalizationServices",
    settings: "Settings",
    logger: BoundLogger,
) -> None:
    if not settings.localization.RUN_MIGRATION_ON_STARTUP:
        logger.info("startup_migration_skipped", reason="disabled")
        return

    result = await services.migration.run_startup_migration()
    if result is None:
        return
    if result.success:
        logger.info("startup_migration_completed", files_created=result.files_created)
    else:
        logger.error(
            "startup_migration_failed",
            files_created=result.files_created,
            errors=result.errors,
        )
    services.status.invalidate()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    services = get_localization_services()
    app.state.localization = services
    await _run_startup_migration(services, settings, logger)

    logger.info(
        "localization_providers_active",
        providers=[type(p).__name__ for p in services.chain.providers],
    )

    yield

    logger.info("application_shutdown")
