"""
Tests for TranscriptionService.

Database operations run on in-memory SQLite; storage and the processing
backend are mocked.

System role: Verification of the persisted job service layer
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from video_translator.application.services import TranscriptionService
from video_translator.application.services.transcription_service import process_video_in_background
from video_translator.boundary.db.CRUD import transcription_crud
from video_translator.core.exceptions import (
    FileValidationError,
    InvalidTransitionError,
    JobNotFoundError,
    ProcessingError,
)
from video_translator.core.job_lifecycle import JobStatus


@pytest.fixture
def mock_storage():
    storage = MagicMock()
    storage.upload_bytes = MagicMock(side_effect=lambda key, data, content_type: key)
    storage.delete_objects = MagicMock()
    storage.get_public_url = MagicMock(side_effect=lambda key: f"https://cdn.test/{key}")
    return storage


@pytest.fixture
def mock_processing():
    processing = AsyncMock()
    processing.process_video = AsyncMock(return_value="https://cdn.test/generated/x.mp3")
    processing.extract_audio = AsyncMock(return_value="audio/x.wav")
    return processing


@pytest.fixture
def service(test_async_db, mock_storage, mock_processing):
    return TranscriptionService(test_async_db, mock_storage, mock_processing)


class TestCreateAndRead:
    @pytest.mark.asyncio
    async def test_create_transcription_job(self, service):
        record = await service.create_transcription_job("clip.mp4", 1024, "en")

        assert record.status is JobStatus.UPLOADING
        assert record.progress == 0
        assert (await service.get_transcription_job(record.id)).id == record.id

    @pytest.mark.asyncio
    async def test_get_unknown_job(self, service):
        with pytest.raises(JobNotFoundError):
            await service.get_transcription_job(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_list_newest_first(self, service):
        first = await service.create_transcription_job("a.mp4", 1, "en")
        second = await service.create_transcription_job("b.mp4", 1, "en")

        jobs = await service.get_transcription_jobs()

        assert [job.id for job in jobs] == [second.id, first.id]


class TestSubmitVideo:
    @pytest.mark.asyncio
    async def test_uploads_under_deterministic_key(self, service, mock_storage):
        # Act
        record, key = await service.submit_video("clip.MOV", "video/quicktime", b"data", "de")

        # Assert
        assert key == f"videos/{record.id}.mov"
        mock_storage.upload_bytes.assert_called_once_with(key, b"data", "video/quicktime")
        assert record.file_size == 4

    @pytest.mark.asyncio
    async def test_rejects_non_video_without_creating(self, service, mock_storage):
        with pytest.raises(FileValidationError):
            await service.submit_video("doc.pdf", "application/pdf", b"%PDF", "de")

        assert await service.get_transcription_jobs() == []
        mock_storage.upload_bytes.assert_not_called()


class TestUpdate:
    @pytest.mark.asyncio
    async def test_forward_update(self, service):
        record = await service.create_transcription_job("clip.mp4", 1, "en")

        updated = await service.update_transcription_job(record.id, status=JobStatus.PROCESSING, progress=10)

        assert updated.status is JobStatus.PROCESSING
        assert updated.progress == 10

    @pytest.mark.asyncio
    async def test_skipping_is_rejected(self, service):
        record = await service.create_transcription_job("clip.mp4", 1, "en")

        with pytest.raises(InvalidTransitionError):
            await service.update_transcription_job(record.id, status=JobStatus.TRANSLATING)

    @pytest.mark.asyncio
    async def test_identity_fields_are_rejected(self, service):
        record = await service.create_transcription_job("clip.mp4", 1, "en")

        with pytest.raises(ValueError):
            await service.update_transcription_job(record.id, file_name="other.mp4")

    @pytest.mark.asyncio
    async def test_stale_read_does_not_overwrite_failed_job(self, service, test_async_db):
        # Arrange
        stale = await service.create_transcription_job("clip.mp4", 1, "en")
        await transcription_crud.mark_processing(test_async_db, stale.id)
        await transcription_crud.mark_failed(test_async_db, stale.id, "Audio extraction failed")
        service.get_transcription_job = AsyncMock(return_value=stale)

        # Act
        with pytest.raises(InvalidTransitionError):
            await service.update_transcription_job(stale.id, status=JobStatus.PROCESSING, progress=10)

        # Assert
        row = await transcription_crud.get_by_id(test_async_db, stale.id)
        assert row.status is JobStatus.ERROR
        assert row.error_message == "Audio extraction failed"


class TestProcessVideo:
    @pytest.mark.asyncio
    async def test_returns_audio_url(self, service, mock_processing):
        record = await service.create_transcription_job("clip.mp4", 1, "en")

        audio_url = await service.process_video(record.id, "videos/x.mp4", "en")

        assert audio_url == "https://cdn.test/generated/x.mp3"
        mock_processing.process_video.assert_awaited_once_with(str(record.id), "videos/x.mp4", "en")

    @pytest.mark.asyncio
    async def test_unreachable_backend_marks_job_failed(self, service, mock_processing):
        # Arrange
        record = await service.create_transcription_job("clip.mp4", 1, "en")
        mock_processing.process_video.side_effect = ProcessingError("Processing backend unreachable: refused")

        # Act
        with pytest.raises(ProcessingError):
            await service.process_video(record.id, "videos/x.mp4", "en")

        # Assert
        failed = await service.get_transcription_job(record.id)
        assert failed.status is JobStatus.ERROR
        assert failed.error_message == "Processing backend unreachable: refused"

    @pytest.mark.asyncio
    async def test_completed_job_is_not_marked_failed(self, service, mock_processing, test_async_db):
        # Arrange
        record = await service.create_transcription_job("clip.mp4", 1, "en")
        await transcription_crud.mark_processing(test_async_db, record.id)
        await transcription_crud.mark_transcribing(test_async_db, record.id)
        await transcription_crud.mark_translating(test_async_db, record.id, "es", "hola")
        await transcription_crud.mark_translated(test_async_db, record.id)
        await transcription_crud.mark_completed(test_async_db, record.id, "https://cdn.test/generated/x.mp3")
        mock_processing.process_video.side_effect = ProcessingError("Processing backend unreachable: ReadTimeout")

        # Act
        with pytest.raises(ProcessingError):
            await service.process_video(record.id, "videos/x.mp4", "en")

        # Assert
        job = await service.get_transcription_job(record.id)
        assert job.status is JobStatus.COMPLETED
        assert job.audio_url == "https://cdn.test/generated/x.mp3"
        assert job.error_message is None

    @pytest.mark.asyncio
    async def test_background_wrapper_swallows_processing_error(
        self, test_session_factory, mock_storage, mock_processing
    ):
        async with test_session_factory() as session:
            row = await transcription_crud.create(session, file_name="a.mp4", file_size=1, target_language="en")
            await session.commit()
        mock_processing.process_video.side_effect = ProcessingError("boom")

        await process_video_in_background(
            test_session_factory, mock_storage, mock_processing, row.id, "videos/a.mp4", "en"
        )

        async with test_session_factory() as session:
            assert (await transcription_crud.get_by_id(session, row.id)).status is JobStatus.ERROR

    @pytest.mark.asyncio
    async def test_extract_audio_and_public_url(self, service):
        job_id = uuid.uuid4()

        assert await service.extract_audio(job_id, "videos/x.mp4") == "audio/x.wav"
        assert service.get_public_url("generated/x.mp3") == "https://cdn.test/generated/x.mp3"


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes_record_and_objects(self, service, mock_storage):
        record = await service.create_transcription_job("clip.webm", 1, "en")

        assert await service.delete_transcription_job(record.id) is True

        mock_storage.delete_objects.assert_called_once_with(
            [f"videos/{record.id}.webm", f"audio/{record.id}.wav", f"generated/{record.id}.mp3"]
        )
        with pytest.raises(JobNotFoundError):
            await service.get_transcription_job(record.id)

    @pytest.mark.asyncio
    async def test_unknown_job(self, service, mock_storage):
        assert await service.delete_transcription_job(uuid.uuid4()) is False
        mock_storage.delete_objects.assert_not_called()
