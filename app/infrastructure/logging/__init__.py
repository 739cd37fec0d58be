"""Structured logging infrastructure.

Centralized logging configuration and request context helpers built on
structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - get_current_user(): Get the acting user bound to the request
    - clear_request_context(): Clear all request context

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
    get_current_user,
)
from infrastructure.logging.formatters import (
    add_app_info,
    truncate_long_values,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_request_context",
    "clear_request_context",
    "get_correlation_id",
    "get_current_user",
    # Formatters
    "add_app_info",
    "truncate_long_values",
]
