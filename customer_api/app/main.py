"""
Main entrypoint for the Customer Management API.

This module assembles the FastAPI application: it sets up logging,
registers the exception handlers and includes the versioned routers.
``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
directly::

    uvicorn customer_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.error_handling import setup_error_handling
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Creates the database file if needed and applies pending migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    setup_error_handling(app)

    # Customer routes are served at the root (``/customers``); version 1
    # is the only version, so it carries no URL prefix.
    app.include_router(v1_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
