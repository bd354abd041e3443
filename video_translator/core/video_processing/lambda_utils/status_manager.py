"""
Status reporting for the processing pipeline.

The pipeline reports each step through a StatusReporter. The database
implementation opens a short-lived session per write.
"""

import logging
from typing import Protocol

from sqlalchemy.ext.asyncio import async_sessionmaker

from video_translator.core.video_processing.database.job_status_updater import JobStatusUpdater

logger = logging.getLogger(__name__)


class StatusReporter(Protocol):
    async def mark_processing(self, job_id: str) -> None: ...

    async def mark_transcribing(self, job_id: str) -> None: ...

    async def mark_translating(self, job_id: str, original_language: str, transcription_text: str) -> None: ...

    async def mark_translated(self, job_id: str) -> None: ...

    async def mark_completed(self, job_id: str, audio_url: str) -> None: ...

    async def mark_failed(self, job_id: str, error_message: str) -> None: ...


class DatabaseStatusReporter:
    """StatusReporter writing through JobStatusUpdater."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def mark_processing(self, job_id: str) -> None:
        async with self._session_factory() as session:
            await JobStatusUpdater(session).mark_processing(job_id)

    async def mark_transcribing(self, job_id: str) -> None:
        async with self._session_factory() as session:
            await JobStatusUpdater(session).mark_transcribing(job_id)

    async def mark_translating(self, job_id: str, original_language: str, transcription_text: str) -> None:
        async with self._session_factory() as session:
            await JobStatusUpdater(session).mark_translating(job_id, original_language, transcription_text)

    async def mark_translated(self, job_id: str) -> None:
        async with self._session_factory() as session:
            await JobStatusUpdater(session).mark_translated(job_id)

    async def mark_completed(self, job_id: str, audio_url: str) -> None:
        async with self._session_factory() as session:
            await JobStatusUpdater(session).mark_completed(job_id, audio_url)

    async def mark_failed(self, job_id: str, error_message: str) -> None:
        async with self._session_factory() as session:
            await JobStatusUpdater(session).mark_failed(job_id, error_message)
