"""API-specific dependencies."""

from .dependencies import (
    get_job_service,
    get_notification_center,
    get_processing_client,
    get_service_cache,
    get_session_factory,
    get_stage_driver,
    get_storage_client,
    get_transcription_service,
)

__all__ = [
    "get_job_service",
    "get_notification_center",
    "get_processing_client",
    "get_service_cache",
    "get_session_factory",
    "get_stage_driver",
    "get_storage_client",
    "get_transcription_service",
]
