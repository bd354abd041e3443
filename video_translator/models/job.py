"""
Job domain models and schemas.

The immutable JobRecord used by the stage driver and returned by the API,
plus request/response schemas for job endpoints.

Dependencies: pydantic, video_translator.core.job_lifecycle
System role: Job record contract and job API schemas
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from video_translator.core.job_lifecycle import JobStatus, validate_transition

IMMUTABLE_FIELDS = frozenset({"id", "file_name", "file_size", "target_language", "created_at"})


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JobRecord(BaseModel):
    """
    One video's translation request and its current lifecycle state.

    Records are frozen. Every mutation goes through `evolve`, which checks
    the lifecycle rules, refreshes `updated_at` and returns a new record.

    Invariants:
        audio_url is set iff status is COMPLETED
        error_message is set iff status is ERROR
        0 <= progress <= 100
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    file_name: str = Field(description="Original file name")
    file_size: int = Field(ge=0, description="File size in bytes")
    status: JobStatus = Field(default=JobStatus.UPLOADING)
    progress: int = Field(default=0, ge=0, le=100, description="Progress within the current stage")
    original_language: str | None = Field(default=None, description="Detected source language")
    target_language: str = Field(description="Language to translate into")
    audio_url: str | None = Field(default=None, description="Public URL of the translated audio")
    transcription_text: str | None = Field(default=None, description="Recognised source text")
    error_message: str | None = Field(default=None, description="Failure reason")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def _check_terminal_fields(self) -> "JobRecord":
        if (self.audio_url is not None) != (self.status is JobStatus.COMPLETED):
            raise ValueError("audio_url must be set exactly when the job is completed")
        if (self.error_message is not None) != (self.status is JobStatus.ERROR):
            raise ValueError("error_message must be set exactly when the job failed")
        return self

    @property
    def is_terminal(self) -> bool:
        return self.status in (JobStatus.COMPLETED, JobStatus.ERROR)

    def evolve(self, **changes: Any) -> "JobRecord":
        """
        Return a copy of this record with `changes` applied.

        Raises:
            ValueError: If an identity field is changed
            InvalidTransitionError: If the status/progress change is illegal
        """
        frozen = IMMUTABLE_FIELDS.intersection(changes)
        if frozen:
            raise ValueError(f"Cannot change identity fields: {sorted(frozen)}")

        status = JobStatus(changes.get("status", self.status))
        progress = changes.get("progress", self.progress)
        validate_transition(self.status, status, self.progress, progress)

        data = self.model_dump()
        data.update(changes)
        data["updated_at"] = utc_now()
        return JobRecord.model_validate(data)


class JobListResponse(BaseModel):
    """List of jobs, newest first."""

    jobs: list[JobRecord]
    total: int


class SubmissionRejection(BaseModel):
    """A file refused at submission time."""

    file_name: str
    reason: str = Field(description="User-facing rejection message")


class BatchSubmissionResponse(BaseModel):
    """Outcome of submitting several files at once."""

    accepted: list[JobRecord] = Field(default_factory=list)
    rejected: list[SubmissionRejection] = Field(default_factory=list)


class DownloadResponse(BaseModel):
    """Result of requesting a job's translated audio."""

    job_id: uuid.UUID
    started: bool = Field(description="False when the job is not downloadable yet")
    audio_url: str | None = None


class DeleteResponse(BaseModel):
    """Result of a delete request."""

    job_id: uuid.UUID
    deleted: bool
