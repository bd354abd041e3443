"""
Liveness and readiness endpoints.

GET /health reports the stage driver's job counts; GET /health/db checks
that the transcriptions database answers.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from video_translator.api.deps import get_stage_driver
from video_translator.boundary.db import get_async_db
from video_translator.core.stage_driver import StageDriver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    total_jobs: int
    active_jobs: int


class DatabaseHealthResponse(BaseModel):
    status: str
    database: str


@router.get("", response_model=HealthResponse)
async def health_check(driver: StageDriver = Depends(get_stage_driver)) -> HealthResponse:
    jobs = driver.list_jobs()
    active = sum(1 for job in jobs if not job.is_terminal)
    return HealthResponse(status="healthy", total_jobs=len(jobs), active_jobs=active)


@router.get("/db", response_model=DatabaseHealthResponse)
async def health_check_db(db: AsyncSession = Depends(get_async_db)) -> DatabaseHealthResponse:
    """503 when the database cannot run a trivial query."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"{__name__}:health_check_db - {type(e).__name__}: {e}")
        raise HTTPException(status_code=503, detail="Database unavailable")
    return DatabaseHealthResponse(status="healthy", database="reachable")
