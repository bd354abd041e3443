"""
Job API endpoints.

Routes:
- POST /jobs - Submit one or more videos for translation
- GET /jobs - List jobs, newest first
- GET /jobs/{id} - Get one job
- DELETE /jobs/{id}?confirm=true - Delete a job
- POST /jobs/{id}/download - Start downloading a completed job's audio

Dependencies: video_translator.application.services, video_translator.models
System role: Stage driver HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from video_translator.api.deps import get_job_service
from video_translator.api.routers.router_utils import (
    handle_job_errors,
    require_supported_language,
    to_video_file,
)
from video_translator.application.services import JobService
from video_translator.models.job import (
    BatchSubmissionResponse,
    DeleteResponse,
    DownloadResponse,
    JobListResponse,
    JobRecord,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])

DELETE_NOT_CONFIRMED_DETAIL = "Deletion not confirmed"


@router.post("", response_model=BatchSubmissionResponse, status_code=status.HTTP_201_CREATED)
@handle_job_errors
async def submit_jobs(
    files: list[UploadFile] = File(...),
    target_language: str = Form(...),
    job_service: JobService = Depends(get_job_service),
) -> BatchSubmissionResponse:
    """
    Submit videos for translation.

    Every file is validated on its own: accepted files get a job record in
    UPLOADING, rejected files are reported with the reason and create
    nothing.

    Args:
        files: Uploaded video files
        target_language: ISO 639-1 code to translate into
        job_service: Injected JobService

    Returns:
        BatchSubmissionResponse: Accepted records and rejections

    Raises:
        HTTPException(400): Unsupported target language
    """
    require_supported_language(target_language)
    return await job_service.submit_files(
        [to_video_file(upload) for upload in files],
        target_language,
    )


@router.get("", response_model=JobListResponse)
async def list_jobs(job_service: JobService = Depends(get_job_service)) -> JobListResponse:
    """List all jobs, newest first."""
    return job_service.list_jobs()


@router.get("/{job_id}", response_model=JobRecord)
@handle_job_errors
async def get_job(
    job_id: UUID,
    job_service: JobService = Depends(get_job_service),
) -> JobRecord:
    """
    Get a job's status and progress for polling.

    Raises:
        HTTPException(404): Job not found
    """
    return job_service.get_job(job_id)


@router.delete("/{job_id}", response_model=DeleteResponse)
@handle_job_errors
async def delete_job(
    job_id: UUID,
    confirm: bool = False,
    job_service: JobService = Depends(get_job_service),
) -> DeleteResponse:
    """
    Delete a job and cancel its pending work.

    Without `confirm=true` the job is left untouched.

    Raises:
        HTTPException(404): Job not found
        HTTPException(409): Deletion not confirmed
    """
    result = await job_service.delete_job(job_id, confirmed=confirm)
    if not result.deleted:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DELETE_NOT_CONFIRMED_DETAIL)
    return result


@router.post("/{job_id}/download", response_model=DownloadResponse)
@handle_job_errors
async def download_job(
    job_id: UUID,
    job_service: JobService = Depends(get_job_service),
) -> DownloadResponse:
    """
    Start downloading a job's translated audio.

    Does nothing unless the job is completed; `started` reports which.

    Raises:
        HTTPException(404): Job not found
    """
    return await job_service.download(job_id)
