"""
Stage driver configuration.

Timings and fault injection for the client-side job lifecycle driver.
Stage durations keep the 2:3:8:5 ratio of upload, processing,
transcription and translation by default.

Dependencies: pydantic_settings
System role: Stage driver timing and failure configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StageDriverSettings(BaseSettings):
    """Settings for the job stage driver."""

    model_config = SettingsConfigDict(
        env_prefix="STAGE_DRIVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    uploading_seconds: float = Field(default=2.0, ge=0, description="Duration of the upload stage")
    processing_seconds: float = Field(default=3.0, ge=0, description="Duration of the processing stage")
    transcribing_seconds: float = Field(default=8.0, ge=0, description="Duration of the transcription stage")
    translating_seconds: float = Field(default=5.0, ge=0, description="Duration of the translation stage")
    stage_gap_seconds: float = Field(default=0.5, ge=0, description="Pause between consecutive stages")

    failure_probability: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Probability that a submitted job is routed to error",
    )
    failure_delay_seconds: float = Field(
        default=3.0,
        ge=0,
        description="Delay before an injected failure is applied",
    )
    download_delay_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Delay before the download completed notification",
    )

    placeholder_language: str = Field(
        default="es",
        description="Original language recorded when entering transcription",
    )
    audio_url_template: str = Field(
        default="https://storage.example.com/generated/{job_id}.mp3",
        description="Template for the audio URL assigned on completion",
    )
