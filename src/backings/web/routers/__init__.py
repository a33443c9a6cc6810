"""API routers for the REST API."""

from backings.web.routers.analyze import router as analyze_router
from backings.web.routers.schedule import router as schedule_router
from backings.web.routers.validate import router as validate_router

__all__ = [
    "analyze_router",
    "schedule_router",
    "validate_router",
]
