from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from infrastructure.logging import get_module_logger
from modules.localization.errors import (
    FileSavingDisabledError,
    InvalidArgumentError,
    OverrideStoreError,
)

logger = get_module_logger()


async def invalid_argument_handler(_request: Request, exc: Exception):
    """Return 400 with the validation message."""
    return JSONResponse(status_code=400, content={"message": str(exc)})


async def file_saving_disabled_handler(_request: Request, exc: Exception):
    return JSONResponse(status_code=403, content={"message": str(exc)})


async def override_store_error_handler(request: Request, exc: Exception):
    """Return 503 when the persistent override store is unavailable."""
    logger.error(
        "override_store_unavailable",
        path=request.url.path,
        error=str(exc),
        error_code=getattr(exc, "error_code", None),
    )
    return JSONResponse(
        status_code=503, content={"message": "Override store unavailable"}
    )


def setup_error_handlers(app: FastAPI):
    """
    Map localization errors to HTTP responses for the FastAPI application.
    """
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(FileSavingDisabledError, file_saving_disabled_handler)
    app.add_exception_handler(OverrideStoreError, override_store_error_handler)
