"""Custom structlog processors used by the logging pipeline.

Translation values and override payloads can be arbitrarily long, so the
pipeline trims string fields before rendering. Application info is stamped
on every entry so multi-instance logs can be told apart.

Usage:
    from infrastructure.logging.formatters import add_app_info, truncate_long_values
"""

from typing import Any, Callable

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]


def add_app_info(app_name: str, app_version: str = "unknown") -> Processor:
    """Create a processor that adds application info to log entries.

    Args:
        app_name: Name of the application.
        app_version: Version string (usually the deployed git sha).

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("app_name", app_name)
        event_dict.setdefault("app_version", app_version)
        return event_dict

    return processor


def truncate_long_values(max_length: int = 300) -> Processor:
    """Create a processor that shortens string values over ``max_length``.

    Args:
        max_length: Maximum string length kept verbatim.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if key == "event":
                continue
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = f"{value[:max_length]}...[{len(value)} chars]"
        return event_dict

    return processor
