"""Structlog configuration and logger setup.

Configures structlog once per process with environment-aware rendering:
console output during development, JSON in production, and silence under
pytest.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configure logging at app startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - infrastructure.configuration.Settings
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import add_app_info, truncate_long_values

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "resource-translations"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _configure_for_tests() -> BoundLogger:
    logging.root.setLevel(logging.CRITICAL + 1)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=logging.CRITICAL + 1,
        force=True,
    )
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional["Settings"] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production. Controls JSON vs console output.
        settings: Settings to read defaults from. Resolved from the
            application provider when omitted.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        return _configure_for_tests()

    if settings is None and (log_level is None or is_production is None):
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    prod_mode = is_production if is_production is not None else settings.is_production
    version = settings.GIT_SHA if settings is not None else "unknown"

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME, version),
        truncate_long_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Automatically detects the calling module and binds component
    and module_path context for structured logging.

    Returns:
        Logger bound with module context

    Example:
        # In modules/localization/overrides/service.py
        logger = get_module_logger()
        # context: {"component": "service",
        #           "module_path": "modules.localization.overrides.service"}

        logger.info("override_saved", key="/contenttypes/...")
    """
    logger: BoundLogger = structlog.stdlib.get_logger()

    current_frame = inspect.currentframe()
    if current_frame is None or current_frame.f_back is None:
        return logger

    module = inspect.getmodule(current_frame.f_back)
    if module:
        module_name = module.__name__
        return logger.bind(
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return logger.bind(component="unknown")
