from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.errors import setup_error_handlers
from api.router import api_router
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.request_context import RequestContextMiddleware


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    app = FastAPI(title="Resource translations", lifespan=lifespan)
    setup_error_handlers(app)

    allow_origins = (
        ["*"]
        if settings.is_production
        else [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(api_router)
    return app


handler = create_app()
