"""
Transcription ORM model.

Persisted job record for the real processing path. The API creates the row,
the processing backend is its only writer while a job runs.

Dependencies: sqlalchemy, video_translator.boundary.db.base
System role: System of record for translation jobs
"""

from sqlalchemy import BigInteger, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from video_translator.boundary.db.base import Base, TimestampMixin, UUIDMixin
from video_translator.core.job_lifecycle import JobStatus


class TranscriptionModel(Base, UUIDMixin, TimestampMixin):
    """
    Translation job row.

    Attributes:
        id: UUID primary key (auto-generated)
        file_name: Original video file name
        file_size: Video size in bytes
        status: Lifecycle stage, stored as its lowercase value
        progress: Percentage complete (0-100)
        original_language: Language detected by speech recognition
        target_language: Language the audio is translated into
        audio_url: Public URL of the generated audio (completed only)
        transcription_text: Recognised source text
        error_message: Failure reason (error only)
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)

    Workflow:
        1. API creates the row in UPLOADING and uploads the video
        2. Processing backend moves it through PROCESSING, TRANSCRIBING,
           TRANSLATING with progress 10/30/60/80
        3. Backend sets COMPLETED with audio_url, or ERROR with error_message
        4. Client polls /transcriptions/{id}
    """

    __tablename__ = "transcriptions"

    file_name: Mapped[str] = mapped_column(String(512), nullable=False)

    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)

    status: Mapped[JobStatus] = mapped_column(
        Enum(
            JobStatus,
            native_enum=False,
            length=32,
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        nullable=False,
        default=JobStatus.UPLOADING,
    )

    progress: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Progress percentage (0-100)",
    )

    original_language: Mapped[str | None] = mapped_column(String(16), nullable=True)

    target_language: Mapped[str] = mapped_column(String(16), nullable=False)

    audio_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    transcription_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)
