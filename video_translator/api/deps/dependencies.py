"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: video_translator.configs, video_translator.application, video_translator.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from video_translator.application.services import (
    JobService,
    ProcessingClient,
    TranscriptionService,
)
from video_translator.boundary.db import get_async_db, get_async_session_factory
from video_translator.boundary.storage import ObjectStorageClient
from video_translator.configs import get_settings
from video_translator.core.stage_driver import NotificationCenter, StageDriver


class ServiceCache:
    """Container for cached client instances."""

    def __init__(self):
        self._storage_client = None
        self._processing_client = None

    @property
    def storage_client(self) -> ObjectStorageClient:
        """Get cached object storage client."""
        if self._storage_client is None:
            self._storage_client = ObjectStorageClient.from_settings(get_settings().storage)
        return self._storage_client

    @property
    def processing_client(self) -> ProcessingClient:
        """Get cached processing backend client."""
        if self._processing_client is None:
            self._processing_client = ProcessingClient.from_settings(get_settings().functions)
        return self._processing_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._storage_client = None
        self._processing_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_stage_driver(request: Request) -> StageDriver:
    """Stage driver created by the application lifespan."""
    return request.app.state.stage_driver


def get_notification_center(request: Request) -> NotificationCenter:
    return request.app.state.notification_center


def get_job_service(
    driver: StageDriver = Depends(get_stage_driver),
    notifications: NotificationCenter = Depends(get_notification_center),
) -> JobService:
    """
    Get job service instance.

    Args:
        driver: Application-wide stage driver
        notifications: Application-wide notification center

    Returns:
        JobService: Job service bound to the shared driver
    """
    return JobService(driver=driver, notifications=notifications)


def get_storage_client() -> ObjectStorageClient:
    return get_service_cache().storage_client


def get_processing_client() -> ProcessingClient:
    return get_service_cache().processing_client


def get_session_factory() -> async_sessionmaker:
    """Session factory for work that outlives the request (background tasks)."""
    return get_async_session_factory()


def get_transcription_service(
    db: AsyncSession = Depends(get_async_db),
    storage: ObjectStorageClient = Depends(get_storage_client),
    processing: ProcessingClient = Depends(get_processing_client),
) -> TranscriptionService:
    """
    Get transcription service instance.

    Args:
        db: Async database session (injected via Depends)
        storage: Object storage client
        processing: Processing backend client

    Returns:
        TranscriptionService: Service for persisted jobs
    """
    return TranscriptionService(db=db, storage=storage, processing=processing)
