"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Outcome classes for infrastructure operations.

    Attributes:
        SUCCESS: Operation completed
        TRANSIENT_ERROR: Retryable failure (throttling, timeout)
        PERMANENT_ERROR: Non-retryable failure (validation, bad request)
        UNAUTHORIZED: Credentials rejected or access denied
        NOT_FOUND: Target resource (table, item) does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
