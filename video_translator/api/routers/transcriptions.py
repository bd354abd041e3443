"""
Transcription API endpoints.

Routes:
- POST /transcriptions - Upload a video and start backend processing
- GET /transcriptions - List persisted jobs, newest first
- GET /transcriptions/{id} - Get one persisted job
- DELETE /transcriptions/{id}?confirm=true - Delete a job and its files

Dependencies: video_translator.application.services, video_translator.models
System role: Persisted job HTTP API
"""

import logging
from uuid import UUID

from fastapi import (
    APIRouter,
    BackgroundTasks,
    Depends,
    File,
    Form,
    HTTPException,
    Query,
    UploadFile,
    status,
)
from sqlalchemy.ext.asyncio import async_sessionmaker

from video_translator.api.deps import get_session_factory, get_transcription_service
from video_translator.api.routers.router_utils import (
    handle_job_errors,
    require_supported_language,
    to_video_file,
)
from video_translator.application.services import TranscriptionService
from video_translator.application.services.transcription_service import process_video_in_background
from video_translator.core.exceptions import JobNotFoundError
from video_translator.core.stage_driver.validation import validate_upload
from video_translator.models.job import DeleteResponse, JobListResponse, JobRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transcriptions", tags=["transcriptions"])


@router.post("", response_model=JobRecord, status_code=status.HTTP_201_CREATED)
@handle_job_errors
async def create_transcription(
    background_tasks: BackgroundTasks,
    file: UploadFile = File(...),
    target_language: str = Form(...),
    service: TranscriptionService = Depends(get_transcription_service),
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> JobRecord:
    """
    Upload a video and queue it for processing.

    The upload is checked from its metadata before its content is read.
    The job record is committed before processing starts so polling can
    find it. The processing backend then records every stage on it.

    Raises:
        HTTPException(400): Not a video, too large, or unsupported language
    """
    require_supported_language(target_language)
    validate_upload(to_video_file(file))
    data = await file.read()
    record, key = await service.submit_video(
        file_name=file.filename or "",
        content_type=file.content_type,
        data=data,
        target_language=target_language,
    )
    await service.db.commit()

    logger.info(
        f"{__name__}:create_transcription - Transcription job queued",
        extra={"job_id": str(record.id), "key": key, "target_language": target_language},
    )
    background_tasks.add_task(
        process_video_in_background,
        session_factory,
        service.storage,
        service.processing,
        record.id,
        key,
        target_language,
    )
    return record


@router.get("", response_model=JobListResponse)
@handle_job_errors
async def list_transcriptions(
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    service: TranscriptionService = Depends(get_transcription_service),
) -> JobListResponse:
    jobs = await service.get_transcription_jobs(limit=limit, offset=offset)
    return JobListResponse(jobs=jobs, total=len(jobs))


@router.get("/{job_id}", response_model=JobRecord)
@handle_job_errors
async def get_transcription(
    job_id: UUID,
    service: TranscriptionService = Depends(get_transcription_service),
) -> JobRecord:
    """
    Raises:
        HTTPException(404): Job not found
    """
    return await service.get_transcription_job(job_id)


@router.delete("/{job_id}", response_model=DeleteResponse)
@handle_job_errors
async def delete_transcription(
    job_id: UUID,
    confirm: bool = False,
    service: TranscriptionService = Depends(get_transcription_service),
) -> DeleteResponse:
    """
    Delete a persisted job with its stored video and audio.

    Raises:
        HTTPException(404): Job not found
        HTTPException(409): Deletion not confirmed
    """
    if not confirm:
        # Existence is still checked so unknown ids report 404
        await service.get_transcription_job(job_id)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Deletion not confirmed")

    if not await service.delete_transcription_job(job_id):
        raise JobNotFoundError(str(job_id))
    await service.db.commit()
    return DeleteResponse(job_id=job_id, deleted=True)
