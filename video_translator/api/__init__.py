"""
API routes module.

FastAPI routers for the client API.
"""

from fastapi import APIRouter

from .routers import (
    health_router,
    jobs_router,
    notifications_router,
    transcriptions_router,
)

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(jobs_router)
api_router.include_router(notifications_router)
api_router.include_router(transcriptions_router)

__all__ = ["api_router"]
