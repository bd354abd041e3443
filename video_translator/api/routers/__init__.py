"""API routers."""

from .health import router as health_router
from .jobs import router as jobs_router
from .notifications import router as notifications_router
from .transcriptions import router as transcriptions_router

__all__ = [
    "health_router",
    "jobs_router",
    "notifications_router",
    "transcriptions_router",
]
