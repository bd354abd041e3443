"""
Job service.

Thin layer between the jobs API and the stage driver: turns uploads into
VideoFile metadata, maps driver results to API schemas and exposes the
notification center.

Dependencies: video_translator.core.stage_driver, video_translator.models
System role: Job lifecycle operations for the client API
"""

import logging
from typing import Iterable
from uuid import UUID

from video_translator.core.exceptions import JobNotFoundError
from video_translator.core.stage_driver import NotificationCenter, StageDriver, VideoFile
from video_translator.models.job import (
    BatchSubmissionResponse,
    DeleteResponse,
    DownloadResponse,
    JobListResponse,
    JobRecord,
    SubmissionRejection,
)
from video_translator.models.notification import NotificationListResponse

logger = logging.getLogger(__name__)


class JobService:
    """Job operations backed by the in-memory stage driver."""

    def __init__(self, driver: StageDriver, notifications: NotificationCenter) -> None:
        self.driver = driver
        self.notifications = notifications

    async def submit_files(
        self,
        files: Iterable[VideoFile],
        target_language: str,
    ) -> BatchSubmissionResponse:
        """
        Submit uploaded files, each independently.

        Args:
            files: Metadata of the uploaded files
            target_language: Language to translate into

        Returns:
            BatchSubmissionResponse: Created records and per-file rejections
        """
        batch = await self.driver.submit_batch(files, target_language)
        logger.info(
            f"{__name__}:submit_files - Batch submitted",
            extra={"accepted": len(batch.accepted), "rejected": len(batch.rejected)},
        )
        return BatchSubmissionResponse(
            accepted=batch.accepted,
            rejected=[
                SubmissionRejection(file_name=file.name, reason=error.message)
                for file, error in batch.rejected
            ],
        )

    def list_jobs(self) -> JobListResponse:
        jobs = self.driver.list_jobs()
        return JobListResponse(jobs=jobs, total=len(jobs))

    def get_job(self, job_id: UUID) -> JobRecord:
        """
        Raises:
            JobNotFoundError: If the job does not exist
        """
        record = self.driver.get(job_id)
        if record is None:
            raise JobNotFoundError(str(job_id))
        return record

    async def delete_job(self, job_id: UUID, confirmed: bool) -> DeleteResponse:
        """Delete a job when the caller confirmed; otherwise leave it untouched."""
        deleted = await self.driver.delete(job_id, lambda record: confirmed)
        return DeleteResponse(job_id=job_id, deleted=deleted)

    async def download(self, job_id: UUID) -> DownloadResponse:
        audio_url = await self.driver.download(job_id)
        return DownloadResponse(job_id=job_id, started=audio_url is not None, audio_url=audio_url)

    def list_notifications(self) -> NotificationListResponse:
        return NotificationListResponse(
            notifications=list(self.notifications.notifications),
            unread_count=self.notifications.unread_count,
        )

    def mark_notification_read(self, notification_id: UUID) -> bool:
        return self.notifications.mark_as_read(notification_id)

    def clear_notifications(self) -> None:
        self.notifications.clear_all()
