"""Request context binding for structured logging.

Request-scoped metadata (correlation id, acting user, path) is bound to
structlog's contextvars so every log entry made while serving a request
carries it. The acting user doubles as the author recorded on translation
overrides.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(correlation_id="req-123", user_email="editor@example.com"):
        logger.info("processing_request")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    user_email: Optional[str] = None,
    user_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind request-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique request identifier. Auto-generated if not provided.
        user_email: Email of the acting user (if available).
        user_id: ID of the acting user (if available).
        request_path: HTTP request path (e.g., "/api/v1/localization/overrides").
        request_method: HTTP method (e.g., "GET", "POST").
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars for the block.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    optional = {
        "user_email": user_email,
        "user_id": user_id,
        "request_path": request_path,
        "request_method": request_method,
    }
    context.update({k: v for k, v in optional.items() if v is not None})
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    return structlog.contextvars.get_contextvars().get("correlation_id")


def get_current_user() -> Optional[str]:
    """Get the acting user bound to the current request, if any.

    Returns:
        The bound user email, falling back to the user id, else None.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("user_email") or ctx.get("user_id")


def clear_request_context() -> None:
    """Clear all request-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
