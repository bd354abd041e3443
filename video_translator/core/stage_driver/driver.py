"""
Stage driver.

Owns the client-side job collection and moves every accepted job through
uploading -> processing -> transcribing -> translating -> completed on a
timer, or routes it to error when the fault policy says so. Each job runs
as its own scheduled task, so jobs never share progress state.

Dependencies: asyncio, video_translator.core.stage_driver
System role: Client-side job lifecycle state machine
"""

import asyncio
import inspect
import logging
import uuid
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterable

from video_translator.configs.stage_driver import StageDriverSettings
from video_translator.core.exceptions import FileValidationError, JobNotFoundError
from video_translator.core.job_lifecycle import MAX_PROGRESS, JobStatus
from video_translator.core.stage_driver.fault_policy import (
    FailurePolicy,
    probabilistic_failure,
)
from video_translator.core.stage_driver.notifier import Notifier
from video_translator.core.stage_driver.scheduler import JobScheduler
from video_translator.core.stage_driver.store import JobStore
from video_translator.core.stage_driver.validation import VideoFile, validate_upload
from video_translator.models.job import JobRecord
from video_translator.models.notification import Notification, NotificationType
from video_translator.observability.correlation import job_scope
from video_translator.observability.log_utils import job_log_context

logger = logging.getLogger(__name__)

PROGRESS_STEP = 10
TIMED_STAGES: tuple[JobStatus, ...] = (
    JobStatus.UPLOADING,
    JobStatus.PROCESSING,
    JobStatus.TRANSCRIBING,
    JobStatus.TRANSLATING,
)

SIMULATED_FAILURE_MESSAGE = "Connection error with the AI processing server"
UNEXPECTED_FAILURE_MESSAGE = "Unexpected error during processing"

_STAGE_LABELS = {
    JobStatus.UPLOADING: "Uploading",
    JobStatus.PROCESSING: "Processing video",
    JobStatus.TRANSCRIBING: "Transcribing audio from",
    JobStatus.TRANSLATING: "Translating",
}

ConfirmCallback = Callable[[JobRecord], bool | Awaitable[bool]]
AudioUrlBuilder = Callable[[JobRecord], str]
Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class StageTimings:
    """Stage durations and delays, in seconds."""

    durations: dict[JobStatus, float] = field(
        default_factory=lambda: {
            JobStatus.UPLOADING: 2.0,
            JobStatus.PROCESSING: 3.0,
            JobStatus.TRANSCRIBING: 8.0,
            JobStatus.TRANSLATING: 5.0,
        }
    )
    stage_gap: float = 0.5
    failure_delay: float = 3.0
    download_delay: float = 2.0

    @classmethod
    def from_settings(cls, settings: StageDriverSettings) -> "StageTimings":
        return cls(
            durations={
                JobStatus.UPLOADING: settings.uploading_seconds,
                JobStatus.PROCESSING: settings.processing_seconds,
                JobStatus.TRANSCRIBING: settings.transcribing_seconds,
                JobStatus.TRANSLATING: settings.translating_seconds,
            },
            stage_gap=settings.stage_gap_seconds,
            failure_delay=settings.failure_delay_seconds,
            download_delay=settings.download_delay_seconds,
        )

    def scaled(self, factor: float) -> "StageTimings":
        """Return timings multiplied by `factor` (0 runs everything back to back)."""
        return StageTimings(
            durations={stage: seconds * factor for stage, seconds in self.durations.items()},
            stage_gap=self.stage_gap * factor,
            failure_delay=self.failure_delay * factor,
            download_delay=self.download_delay * factor,
        )

    def tick_interval(self, stage: JobStatus) -> float:
        return self.durations[stage] / (MAX_PROGRESS // PROGRESS_STEP)


@dataclass
class BatchSubmission:
    """Records accepted and files rejected by one batch submission."""

    accepted: list[JobRecord] = field(default_factory=list)
    rejected: list[tuple[VideoFile, FileValidationError]] = field(default_factory=list)


class StageDriver:
    """
    Client-side job lifecycle driver.

    All public coroutines must run on the same event loop; the driver
    schedules its per-job tasks there.

    Args:
        notifier: Receives every lifecycle notification
        timings: Stage durations and delays
        failure_policy: Decides once per job whether it fails
        store: Job store, a fresh one by default
        scheduler: Task registry, a fresh one by default
        placeholder_language: Original language recorded on transcription
        audio_url_builder: Produces the audio URL set on completion
        sleep: Awaitable sleep, replaceable in tests
    """

    def __init__(
        self,
        notifier: Notifier,
        *,
        timings: StageTimings | None = None,
        failure_policy: FailurePolicy | None = None,
        store: JobStore | None = None,
        scheduler: JobScheduler | None = None,
        placeholder_language: str = "es",
        audio_url_builder: AudioUrlBuilder | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._notifier = notifier
        self._timings = timings or StageTimings()
        self._failure_policy = failure_policy or probabilistic_failure()
        self._store = store or JobStore()
        self._scheduler = scheduler or JobScheduler()
        self._placeholder_language = placeholder_language
        self._audio_url_builder = audio_url_builder or (
            lambda job: f"https://storage.example.com/generated/{job.id}.mp3"
        )
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls,
        settings: StageDriverSettings,
        notifier: Notifier,
        failure_policy: FailurePolicy | None = None,
    ) -> "StageDriver":
        template = settings.audio_url_template
        return cls(
            notifier,
            timings=StageTimings.from_settings(settings),
            failure_policy=failure_policy or probabilistic_failure(settings.failure_probability),
            placeholder_language=settings.placeholder_language,
            audio_url_builder=lambda job: template.format(job_id=job.id),
        )

    @property
    def store(self) -> JobStore:
        return self._store

    def get(self, job_id: uuid.UUID) -> JobRecord | None:
        return self._store.get(job_id)

    def list_jobs(self) -> list[JobRecord]:
        """Return all jobs, newest first."""
        return list(self._store.snapshot)

    async def submit(self, file: VideoFile, target_language: str) -> JobRecord:
        """
        Accept a video and start driving it through the stages.

        Args:
            file: Name, content type and size of the uploaded file
            target_language: Language to translate into

        Returns:
            JobRecord: New record in UPLOADING with progress 0

        Raises:
            FileValidationError: If the file is not a video or is too large
        """
        try:
            validate_upload(file)
        except FileValidationError as e:
            logger.info(
                f"{__name__}:submit - Rejected {file.name}: {e.message}",
                extra={"file_name": file.name, "reason": e.details.get("field")},
            )
            self._emit(NotificationType.ERROR, "Invalid file", e.message)
            raise

        record = self._store.add(
            JobRecord(file_name=file.name, file_size=file.size, target_language=target_language)
        )
        will_fail = self._failure_policy(record)

        logger.info(
            f"{__name__}:submit - Job created",
            extra={**job_log_context(record), "will_fail": will_fail},
        )
        self._emit(
            NotificationType.INFO,
            "File added",
            f"{file.name} was added to the processing queue",
            record.id,
        )
        self._scheduler.schedule(record.id, self._run(record.id, will_fail))
        return record

    async def submit_batch(self, files: Iterable[VideoFile], target_language: str) -> BatchSubmission:
        """Submit each file independently; rejected files do not stop the rest."""
        batch = BatchSubmission()
        for file in files:
            try:
                batch.accepted.append(await self.submit(file, target_language))
            except FileValidationError as e:
                batch.rejected.append((file, e))
        return batch

    async def delete(self, job_id: uuid.UUID, confirm: ConfirmCallback) -> bool:
        """
        Delete a job after the user confirms.

        Args:
            job_id: Job to delete
            confirm: Receives the record, returns (or resolves to) True to proceed

        Returns:
            bool: True if the job was removed, False if the user declined

        Raises:
            JobNotFoundError: If the job does not exist
        """
        record = self._require(job_id)
        decision = confirm(record)
        if inspect.isawaitable(decision):
            decision = await decision
        if not decision:
            logger.info(f"{__name__}:delete - Deletion declined", extra=job_log_context(record))
            return False

        self._scheduler.cancel(job_id)
        removed = self._store.remove(job_id)
        logger.info(f"{__name__}:delete - Job deleted", extra=job_log_context(removed))
        self._emit(
            NotificationType.INFO,
            "File deleted",
            f"{removed.file_name} was removed",
            job_id,
        )
        return True

    async def download(self, job_id: uuid.UUID) -> str | None:
        """
        Start downloading a completed job's audio.

        Returns:
            str | None: The audio URL, or None when the job is not completed

        Raises:
            JobNotFoundError: If the job does not exist
        """
        record = self._require(job_id)
        if record.status is not JobStatus.COMPLETED or not record.audio_url:
            logger.info(
                f"{__name__}:download - Job not downloadable yet",
                extra=job_log_context(record),
            )
            return None

        self._emit(
            NotificationType.INFO,
            "Download started",
            f"Downloading translated audio for {record.file_name}",
            job_id,
        )
        self._scheduler.schedule(job_id, self._finish_download(record), name=f"download-{job_id}")
        return record.audio_url

    async def wait(self, job_id: uuid.UUID) -> None:
        await self._scheduler.wait(job_id)

    async def drain(self) -> None:
        await self._scheduler.drain()

    async def shutdown(self) -> None:
        await self._scheduler.shutdown()

    async def _run(self, job_id: uuid.UUID, will_fail: bool) -> None:
        with job_scope(job_id):
            await self._run_stages(job_id, will_fail)

    async def _run_stages(self, job_id: uuid.UUID, will_fail: bool) -> None:
        try:
            if will_fail:
                await self._sleep(self._timings.failure_delay)
                self._fail(job_id, SIMULATED_FAILURE_MESSAGE)
                return

            for index, stage in enumerate(TIMED_STAGES):
                if index:
                    await self._sleep(self._timings.stage_gap)
                    self._enter_stage(job_id, stage)
                else:
                    self._announce_stage(self._require(job_id), stage)
                await self._advance_progress(job_id, stage)

            await self._sleep(self._timings.stage_gap)
            self._complete(job_id)
        except asyncio.CancelledError:
            raise
        except JobNotFoundError:
            logger.debug(f"{__name__}:_run_stages - Job removed while running", extra={"job_id": str(job_id)})
        except Exception:
            logger.exception(f"{__name__}:_run_stages - Job task crashed", extra={"job_id": str(job_id)})
            record = self._store.get(job_id)
            if record is not None and not record.is_terminal:
                self._fail(job_id, UNEXPECTED_FAILURE_MESSAGE)

    async def _advance_progress(self, job_id: uuid.UUID, stage: JobStatus) -> None:
        interval = self._timings.tick_interval(stage)
        progress = 0
        while progress < MAX_PROGRESS:
            await self._sleep(interval)
            progress = min(progress + PROGRESS_STEP, MAX_PROGRESS)
            self._store.update(job_id, progress=progress)

    def _enter_stage(self, job_id: uuid.UUID, stage: JobStatus) -> None:
        changes: dict = {"status": stage, "progress": 0}
        if stage is JobStatus.TRANSCRIBING:
            changes["original_language"] = self._placeholder_language
        record = self._store.update(job_id, **changes)
        logger.info(f"{__name__}:_enter_stage - Stage entered", extra=job_log_context(record))
        self._announce_stage(record, stage)

    def _announce_stage(self, record: JobRecord, stage: JobStatus) -> None:
        self._emit(
            NotificationType.INFO,
            "Processing",
            f"{_STAGE_LABELS[stage]} {record.file_name}",
            record.id,
        )

    def _complete(self, job_id: uuid.UUID) -> None:
        current = self._require(job_id)
        record = self._store.update(
            job_id,
            status=JobStatus.COMPLETED,
            progress=MAX_PROGRESS,
            audio_url=self._audio_url_builder(current),
        )
        logger.info(f"{__name__}:_complete - Job completed", extra=job_log_context(record))
        self._emit(
            NotificationType.SUCCESS,
            "Translation completed",
            f"{record.file_name} is ready to download",
            job_id,
        )

    def _fail(self, job_id: uuid.UUID, message: str) -> None:
        record = self._store.update(job_id, status=JobStatus.ERROR, error_message=message)
        logger.warning(
            f"{__name__}:_fail - Job failed: {message}",
            extra=job_log_context(record),
        )
        self._emit(
            NotificationType.ERROR,
            "Processing failed",
            f"{record.file_name}: {message}",
            job_id,
        )

    async def _finish_download(self, record: JobRecord) -> None:
        await self._sleep(self._timings.download_delay)
        self._emit(
            NotificationType.SUCCESS,
            "Download completed",
            f"Translated audio for {record.file_name} downloaded",
            record.id,
        )

    def _require(self, job_id: uuid.UUID) -> JobRecord:
        record = self._store.get(job_id)
        if record is None:
            raise JobNotFoundError(str(job_id))
        return record

    def _emit(
        self,
        type_: NotificationType,
        title: str,
        message: str,
        job_id: uuid.UUID | None = None,
    ) -> None:
        self._notifier.notify(Notification(type=type_, title=title, message=message, job_id=job_id))
