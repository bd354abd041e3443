"""
Job status updater.

Writes the processing backend's progress to the transcriptions table:
processing/10 -> transcribing/30 -> translating/60 -> translating/80 ->
completed/100, or error with a message at any point. Each write commits
immediately so the client sees it while the job runs.

Dependencies: sqlalchemy, video_translator.boundary.db
System role: Database persistence layer for the processing backend
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from video_translator.boundary.db.CRUD import transcription_crud
from video_translator.core.exceptions import JobNotFoundError

logger = logging.getLogger(__name__)


class JobStatusUpdater:
    """Update job status during processing."""

    def __init__(self, db_session: AsyncSession) -> None:
        self.db = db_session

    async def mark_processing(self, job_id: str) -> None:
        await self._apply("mark_processing", job_id, transcription_crud.mark_processing)

    async def mark_transcribing(self, job_id: str) -> None:
        await self._apply("mark_transcribing", job_id, transcription_crud.mark_transcribing)

    async def mark_translating(self, job_id: str, original_language: str, transcription_text: str) -> None:
        await self._apply(
            "mark_translating",
            job_id,
            transcription_crud.mark_translating,
            original_language=original_language,
            transcription_text=transcription_text,
        )

    async def mark_translated(self, job_id: str) -> None:
        """Translation finished; speech synthesis starts next."""
        await self._apply("mark_translated", job_id, transcription_crud.mark_translated)

    async def mark_completed(self, job_id: str, audio_url: str) -> None:
        await self._apply("mark_completed", job_id, transcription_crud.mark_completed, audio_url=audio_url)

    async def mark_failed(self, job_id: str, error_message: str) -> None:
        await self._apply("mark_failed", job_id, transcription_crud.mark_failed, error_message=error_message)

    async def _apply(self, operation: str, job_id: str, write, **fields) -> None:
        """
        Run one CRUD write and commit, rolling back on failure.

        Raises:
            JobNotFoundError: No row has that id
            InvalidTransitionError: The row already finished or is at another
                step; the pipeline stops instead of overwriting it
        """
        try:
            row = await write(self.db, UUID(job_id), **fields)
            if row is None:
                raise JobNotFoundError(job_id)
            await self.db.commit()
            logger.info(
                f"{__name__}:{operation} - Job updated",
                extra={"job_id": job_id, "status": row.status.value, "progress": row.progress},
            )
        except Exception as e:
            logger.error(f"{__name__}:{operation} - {type(e).__name__}: {e}", extra={"job_id": job_id})
            await self.db.rollback()
            raise
