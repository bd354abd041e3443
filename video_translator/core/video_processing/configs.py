"""
Configuration settings for the video processing backend.

Provider credentials, endpoints, timeouts and retry bounds, plus the
bucket and database the backend writes to. Credentials and the bucket use
their conventional unprefixed environment variable names.

Dependencies: pydantic, pydantic_settings
System role: Centralized processing backend configuration
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from video_translator.configs.database import to_async_url


class ProcessingSettings(BaseSettings):
    """Settings for the process-video and extract-audio functions."""

    model_config = SettingsConfigDict(
        env_prefix="PROCESSING_",
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Speech recognition (OpenAI Whisper)
    openai_api_key: str = Field(default="", validation_alias=AliasChoices("OPENAI_API_KEY"))
    openai_base_url: str = Field(default="https://api.openai.com/v1")
    whisper_model: str = Field(default="whisper-1")
    default_source_language: str = Field(
        default="es",
        description="Language recorded when the provider does not report one",
    )
    transcription_timeout: float = Field(default=300.0, description="Seconds per ASR request")

    # Machine translation (Google Translate v2)
    google_translate_api_key: str = Field(
        default="", validation_alias=AliasChoices("GOOGLE_TRANSLATE_API_KEY")
    )
    google_translate_url: str = Field(
        default="https://translation.googleapis.com/language/translate/v2"
    )
    translation_timeout: float = Field(default=60.0, description="Seconds per MT request")

    # Speech synthesis (ElevenLabs)
    elevenlabs_api_key: str = Field(default="", validation_alias=AliasChoices("ELEVENLABS_API_KEY"))
    elevenlabs_base_url: str = Field(default="https://api.elevenlabs.io/v1")
    voice_id: str = Field(default="pNInz6obpgDQGcFmaJgB")
    tts_model_id: str = Field(default="eleven_multilingual_v2")
    voice_stability: float = Field(default=0.5, ge=0.0, le=1.0)
    voice_similarity_boost: float = Field(default=0.5, ge=0.0, le=1.0)
    synthesis_timeout: float = Field(default=300.0, description="Seconds per TTS request")

    # Retry bounds shared by all providers
    max_attempts: int = Field(default=3, ge=1, description="Attempts per provider call")
    retry_initial_wait: float = Field(default=1.0, ge=0)
    retry_max_wait: float = Field(default=20.0, ge=0)

    # Audio extraction
    ffmpeg_binary: str = Field(default="ffmpeg")
    audio_sample_rate: int = Field(default=16000, description="Whisper expects 16 kHz mono")
    ffmpeg_timeout: float = Field(default=600.0, description="Seconds allowed for one extraction")

    # Object storage
    storage_bucket: str = Field(
        default="",
        validation_alias=AliasChoices("STORAGE_BUCKET", "PROCESSING_STORAGE_BUCKET"),
    )
    storage_region: str = Field(
        default="us-east-1",
        validation_alias=AliasChoices("STORAGE_REGION", "PROCESSING_STORAGE_REGION"),
    )
    storage_endpoint_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STORAGE_ENDPOINT_URL", "PROCESSING_STORAGE_ENDPOINT_URL"),
    )
    storage_public_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STORAGE_PUBLIC_BASE_URL", "PROCESSING_STORAGE_PUBLIC_BASE_URL"),
    )

    # Database settings (for job status updates)
    database_url: str = Field(
        default="",
        validation_alias=AliasChoices("DATABASE_URL", "PROCESSING_DATABASE_URL"),
        description="Async SQLAlchemy URL of the transcriptions database",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "PROCESSING_LOG_LEVEL"),
    )

    @field_validator("database_url")
    @classmethod
    def _use_async_driver(cls, value: str) -> str:
        return to_async_url(value)


@lru_cache
def get_processing_settings() -> ProcessingSettings:
    """
    Get cached processing settings instance.

    Returns:
        ProcessingSettings: Singleton settings loaded from environment
    """
    return ProcessingSettings()
