"""
Main entrypoint for the App Insights Dashboard API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn app_insights_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import init_store
from .api.v1.router import router as v1_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, mounts the version 1 routes under ``/api/v1``
    and seeds the in‑memory stores when the application starts.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so the imports and startup below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health")
    async def health() -> dict:
        """Liveness probe."""
        return {"message": f"{settings.project_name} is up!"}

    @app.on_event("startup")
    async def startup_event() -> None:
        # Every process start begins from the seed datasets.
        init_store(settings.data_dir)

    return app


app = create_app()
