"""
Transcription CRUD operations.

Provides Create, Read, Update, Delete operations for TranscriptionModel
with one method per lifecycle step the processing backend reports.

Dependencies: sqlalchemy, video_translator.boundary.db.models
System role: Job record persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from video_translator.boundary.db.CRUD.base_crud import BaseCRUD
from video_translator.boundary.db.models.transcription_model import TranscriptionModel
from video_translator.core.exceptions import InvalidTransitionError
from video_translator.core.job_lifecycle import JobStatus, allowed_sources

MAX_ERROR_MESSAGE_LENGTH = 2000


class TranscriptionCRUD(BaseCRUD[TranscriptionModel]):
    """
    CRUD operations for TranscriptionModel.

    The mark_* methods write the status/progress pairs of the processing
    backend contract; callers commit.
    """

    def __init__(self) -> None:
        super().__init__(TranscriptionModel)

    async def list_recent(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[TranscriptionModel]:
        """Return jobs newest first."""
        return await self.get_all(
            session,
            limit=limit,
            offset=offset,
            order_by=TranscriptionModel.created_at.desc(),
        )

    async def get_by_status(
        self,
        session: AsyncSession,
        status: JobStatus,
        limit: int | None = None,
    ) -> Sequence[TranscriptionModel]:
        stmt = select(TranscriptionModel).where(TranscriptionModel.status == status)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_status(
        self,
        session: AsyncSession,
        id: UUID,
        status: JobStatus,
        progress: int | None = None,
        **fields,
    ) -> TranscriptionModel | None:
        """
        Move a job to `status` if the lifecycle allows it from the row's current state.

        The check is part of the UPDATE itself, so a write that races a
        concurrent one (a terminal status set by the API, a late backend
        step) cannot overwrite it. Staying in the same stage requires
        progress not to go backwards.

        Args:
            session: Async database session
            id: Job UUID
            status: New lifecycle status
            progress: Progress percentage (0-100)
            **fields: Other columns to set in the same statement

        Returns:
            Updated TranscriptionModel, or None if the job does not exist

        Raises:
            InvalidTransitionError: The row is terminal or the move skips a stage
        """
        moves_in = TranscriptionModel.status.in_(allowed_sources(status) - {status})
        stays = TranscriptionModel.status == status
        if progress is not None:
            stays = and_(stays, TranscriptionModel.progress <= progress)
        allowed = or_(moves_in, stays) if status in allowed_sources(status) else moves_in

        update_fields: dict = {"status": status, **fields}
        if progress is not None:
            update_fields["progress"] = progress
        row = await self.update_by_id(session, id, allowed, **update_fields)
        if row is not None:
            return row

        current = await self.get_by_id(session, id)
        if current is None:
            return None
        raise InvalidTransitionError(
            current.status.value,
            status.value,
            details={"job_id": str(id)},
        )

    async def mark_processing(self, session: AsyncSession, id: UUID) -> TranscriptionModel | None:
        return await self.update_status(session, id, JobStatus.PROCESSING, progress=10)

    async def mark_transcribing(self, session: AsyncSession, id: UUID) -> TranscriptionModel | None:
        return await self.update_status(session, id, JobStatus.TRANSCRIBING, progress=30)

    async def mark_translating(
        self,
        session: AsyncSession,
        id: UUID,
        original_language: str,
        transcription_text: str,
    ) -> TranscriptionModel | None:
        """Record the recognised text and language and enter TRANSLATING."""
        return await self.update_status(
            session,
            id,
            JobStatus.TRANSLATING,
            progress=60,
            original_language=original_language,
            transcription_text=transcription_text,
        )

    async def mark_translated(self, session: AsyncSession, id: UUID) -> TranscriptionModel | None:
        """Translation done, speech synthesis next."""
        return await self.update_status(session, id, JobStatus.TRANSLATING, progress=80)

    async def mark_completed(
        self,
        session: AsyncSession,
        id: UUID,
        audio_url: str,
    ) -> TranscriptionModel | None:
        return await self.update_status(
            session, id, JobStatus.COMPLETED, progress=100, audio_url=audio_url
        )

    async def mark_failed(
        self,
        session: AsyncSession,
        id: UUID,
        error_message: str,
    ) -> TranscriptionModel | None:
        """
        Mark job as failed, keeping its last progress value.

        Messages longer than MAX_ERROR_MESSAGE_LENGTH are truncated.
        """
        return await self.update_status(
            session,
            id,
            JobStatus.ERROR,
            error_message=error_message[:MAX_ERROR_MESSAGE_LENGTH],
        )


transcription_crud = TranscriptionCRUD()
