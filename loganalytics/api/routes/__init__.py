"""API routers."""

from loganalytics.api.routes.macros import router as macros_router
from loganalytics.api.routes.queries import router as queries_router

__all__ = ["macros_router", "queries_router"]
