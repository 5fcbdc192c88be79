"""FastAPI application factory."""

from fastapi import FastAPI

from loganalytics import __version__
from loganalytics.api.routes import macros_router, queries_router
from loganalytics.config import get_settings
from loganalytics.utilities.logging import setup_logging


def create_app() -> FastAPI:
    """Create the API app with all routes under /api."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Log Analytics Query Resolver",
        description="Preview macro expansion for Log Analytics query templates",
        version=__version__,
    )
    app.include_router(queries_router, prefix="/api")
    app.include_router(macros_router, prefix="/api")
    return app
