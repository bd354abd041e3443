"""
Transcription service.

Persisted job operations for the real processing path: create, list,
update and delete job records, upload videos to object storage and hand
jobs to the processing backend.

Dependencies: sqlalchemy, video_translator.boundary, video_translator.core
System role: Persistence gateway client for translation jobs
"""

import asyncio
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from video_translator.application.services.processing_client import ProcessingClient
from video_translator.boundary.db.CRUD import transcription_crud
from video_translator.boundary.db.models import TranscriptionModel
from video_translator.boundary.storage import (
    ObjectStorageClient,
    audio_key,
    generated_audio_key,
    video_key,
)
from video_translator.core.exceptions import (
    InvalidTransitionError,
    JobNotFoundError,
    ProcessingError,
)
from video_translator.core.job_lifecycle import JobStatus
from video_translator.core.stage_driver.validation import VideoFile, validate_upload
from video_translator.models.job import JobRecord
from video_translator.observability.log_utils import job_log_context

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "status",
        "progress",
        "original_language",
        "audio_url",
        "transcription_text",
        "error_message",
    }
)


class TranscriptionService:
    """Service for persisted translation jobs."""

    def __init__(
        self,
        db: AsyncSession,
        storage: ObjectStorageClient,
        processing: ProcessingClient,
    ) -> None:
        """
        Initialize service.

        Args:
            db: Async database session (request scoped, caller commits)
            storage: Object storage client for job artifacts
            processing: Client for the processing backend functions
        """
        self.db = db
        self.storage = storage
        self.processing = processing

    async def create_transcription_job(
        self,
        file_name: str,
        file_size: int,
        target_language: str,
    ) -> JobRecord:
        """Create a job record in UPLOADING with progress 0."""
        row = await transcription_crud.create(
            self.db,
            file_name=file_name,
            file_size=file_size,
            target_language=target_language,
            status=JobStatus.UPLOADING,
            progress=0,
        )
        record = JobRecord.model_validate(row)
        logger.info(f"{__name__}:create_transcription_job - Job created", extra=job_log_context(record))
        return record

    async def get_transcription_job(self, job_id: UUID) -> JobRecord:
        """
        Raises:
            JobNotFoundError: If the job does not exist
        """
        row = await transcription_crud.get_by_id(self.db, job_id)
        if row is None:
            raise JobNotFoundError(str(job_id))
        return JobRecord.model_validate(row)

    async def get_transcription_jobs(self, limit: int | None = None, offset: int = 0) -> list[JobRecord]:
        """Return jobs newest first."""
        rows = await transcription_crud.list_recent(self.db, limit=limit, offset=offset)
        return [JobRecord.model_validate(row) for row in rows]

    async def update_transcription_job(self, job_id: UUID, **updates) -> JobRecord:
        """
        Apply `updates` to a job after checking the lifecycle rules.

        updated_at is refreshed by the database layer.

        Raises:
            ValueError: Unknown or identity fields in `updates`
            JobNotFoundError: If the job does not exist
            InvalidTransitionError: If the change breaks the lifecycle ordering
        """
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")

        current = await self.get_transcription_job(job_id)
        updated = current.evolve(**updates)

        # Only applies if nobody changed status or progress since the read
        row = await transcription_crud.update_by_id(
            self.db,
            job_id,
            TranscriptionModel.status == current.status,
            TranscriptionModel.progress == current.progress,
            **updates,
        )
        if row is None:
            latest = await transcription_crud.get_by_id(self.db, job_id)
            if latest is None:
                raise JobNotFoundError(str(job_id))
            raise InvalidTransitionError(latest.status.value, updated.status.value)
        return JobRecord.model_validate(row)

    async def upload_file(self, job_id: UUID, file_name: str, data: bytes, content_type: str) -> str:
        """
        Store a job's video as videos/{job_id}.{ext}.

        Returns:
            str: Object key, passed to the processing backend as filePath
        """
        key = video_key(job_id, file_name)
        await asyncio.to_thread(self.storage.upload_bytes, key, data, content_type)
        logger.info(
            f"{__name__}:upload_file - Video uploaded",
            extra={"job_id": str(job_id), "key": key, "size_bytes": len(data)},
        )
        return key

    async def submit_video(
        self,
        file_name: str,
        content_type: str | None,
        data: bytes,
        target_language: str,
    ) -> tuple[JobRecord, str]:
        """
        Validate, record and upload a video.

        Returns:
            tuple[JobRecord, str]: New job record and the video's object key

        Raises:
            FileValidationError: Not a video or too large (nothing created)
        """
        validate_upload(VideoFile(name=file_name, content_type=content_type, size=len(data)))
        record = await self.create_transcription_job(file_name, len(data), target_language)
        key = await self.upload_file(record.id, file_name, data, content_type or "video/mp4")
        return record, key

    async def process_video(self, job_id: UUID, file_path: str, target_language: str) -> str:
        """
        Invoke the processing backend for a job.

        The backend records its own failures. When it cannot be reached at
        all, the job is marked as failed here.

        Returns:
            str: Public URL of the translated audio

        Raises:
            ProcessingError: The backend failed or was unreachable
        """
        try:
            return await self.processing.process_video(str(job_id), file_path, target_language)
        except ProcessingError as e:
            try:
                failed = await transcription_crud.mark_failed(self.db, job_id, e.message)
            except InvalidTransitionError:
                # The backend finished first; its result stands
                logger.info(
                    f"{__name__}:process_video - Job already finished, not marking failed",
                    extra={"job_id": str(job_id)},
                )
            else:
                if failed is not None:
                    await self.db.commit()
            raise

    async def extract_audio(self, job_id: UUID, file_path: str) -> str:
        return await self.processing.extract_audio(str(job_id), file_path)

    def get_public_url(self, key: str) -> str:
        return self.storage.get_public_url(key)

    async def delete_transcription_job(self, job_id: UUID) -> bool:
        """
        Delete a job record and its stored artifacts.

        Returns:
            bool: False if the job did not exist
        """
        row = await transcription_crud.get_by_id(self.db, job_id)
        if row is None:
            return False
        await transcription_crud.delete_by_id(self.db, job_id)
        keys = [video_key(job_id, row.file_name), audio_key(job_id), generated_audio_key(job_id)]
        await asyncio.to_thread(self.storage.delete_objects, keys)
        logger.info(f"{__name__}:delete_transcription_job - Job deleted", extra={"job_id": str(job_id)})
        return True


async def process_video_in_background(
    session_factory: async_sessionmaker,
    storage: ObjectStorageClient,
    processing: ProcessingClient,
    job_id: UUID,
    file_path: str,
    target_language: str,
) -> None:
    """
    Background task wrapper around TranscriptionService.process_video.

    Opens its own session since the request's session is closed by the
    time background tasks run. Failures are already on the job record.
    """
    async with session_factory() as session:
        service = TranscriptionService(session, storage, processing)
        try:
            await service.process_video(job_id, file_path, target_language)
        except ProcessingError as e:
            logger.warning(
                f"{__name__}:process_video_in_background - {e.message}",
                extra={"job_id": str(job_id)},
            )
