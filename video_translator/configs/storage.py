"""
Object storage configuration.

Settings for the bucket holding uploaded videos, extracted audio and
generated speech, and for building public URLs to those objects.

Dependencies: pydantic_settings
System role: Object storage bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Settings for S3-compatible object storage."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="video-files",
        description="Bucket for videos, extracted audio and generated speech",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for the bucket",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for S3-compatible providers (MinIO, Supabase, R2)",
    )
    public_base_url: str | None = Field(
        default=None,
        description="Base URL serving public objects; virtual-hosted S3 URL when unset",
    )
