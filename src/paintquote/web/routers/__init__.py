"""API routers for the REST API."""

from paintquote.web.routers.areas import router as areas_router
from paintquote.web.routers.estimate import router as estimate_router
from paintquote.web.routers.validate import router as validate_router

__all__ = [
    "areas_router",
    "estimate_router",
    "validate_router",
]
