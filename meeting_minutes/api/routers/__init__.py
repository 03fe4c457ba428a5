"""API routers."""

from .attendees import router as attendees_router
from .health import router as health_router
from .meetings import router as meetings_router

__all__ = [
    "attendees_router",
    "health_router",
    "meetings_router",
]
