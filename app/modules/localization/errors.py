"""Localization error types."""


class LocalizationError(Exception):
    """Base class for localization failures."""


class InvalidArgumentError(LocalizationError, ValueError):
    """Raised when a caller passes an unknown language, empty key or bad row."""


class OverrideStoreError(LocalizationError):
    """Raised when the persistent override store cannot complete an operation.

    Attributes:
        error_code: Backend error code, when one is available.
    """

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code


class FileSavingDisabledError(LocalizationError):
    """Raised when a translation file write is attempted with saving disabled."""
