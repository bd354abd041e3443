"""Unit tests for VideoPipeline step ordering and status reporting."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from video_translator.boundary.providers import TranscriptionResult
from video_translator.core.exceptions import TranslationError
from video_translator.core.video_processing.entrypoint import VideoPipeline
from video_translator.core.video_processing.models import ProcessVideoRequest


class RecordingReporter:
    """StatusReporter keeping every call in order."""

    def __init__(self, events: list):
        self.events = events

    async def mark_processing(self, job_id):
        self.events.append(("processing", 10))

    async def mark_transcribing(self, job_id):
        self.events.append(("transcribing", 30))

    async def mark_translating(self, job_id, original_language, transcription_text):
        self.events.append(("translating", 60, original_language, transcription_text))

    async def mark_translated(self, job_id):
        self.events.append(("translating", 80))

    async def mark_completed(self, job_id, audio_url):
        self.events.append(("completed", 100, audio_url))

    async def mark_failed(self, job_id, error_message):
        self.events.append(("error", error_message))


@pytest.fixture
def request_body():
    job_id = str(uuid4())
    return ProcessVideoRequest(jobId=job_id, filePath=f"videos/{job_id}.mp4", targetLanguage="en")


@pytest.fixture
def audio():
    audio = MagicMock()
    audio.local_path = "/tmp/work/job.wav"
    audio.storage_key = "audio/job.wav"
    return audio


@pytest.fixture
def tasks(audio):
    extraction = AsyncMock()
    extraction.extract = AsyncMock(return_value=audio)
    transcription = AsyncMock()
    transcription.transcribe = AsyncMock(return_value=TranscriptionResult(text="hola", language="es"))
    translation = AsyncMock()
    translation.translate = AsyncMock(return_value="hello")
    synthesis = AsyncMock()
    synthesis.synthesize = AsyncMock(return_value=("generated/job.mp3", "https://cdn/generated/job.mp3"))
    return extraction, transcription, translation, synthesis


@pytest.mark.asyncio
async def test_process_reports_every_step(request_body, tasks, audio):
    # Arrange
    events = []
    pipeline = VideoPipeline(*tasks)

    # Act
    result = await pipeline.process(request_body, RecordingReporter(events))

    # Assert
    assert events == [
        ("processing", 10),
        ("transcribing", 30),
        ("translating", 60, "es", "hola"),
        ("translating", 80),
        ("completed", 100, "https://cdn/generated/job.mp3"),
    ]
    assert result.audio_url == "https://cdn/generated/job.mp3"
    assert result.original_language == "es"
    assert result.translated_text == "hello"
    extraction, transcription, translation, synthesis = tasks
    extraction.extract.assert_awaited_once_with(request_body.job_id, request_body.file_path)
    transcription.transcribe.assert_awaited_once_with(request_body.job_id, audio.local_path)
    translation.translate.assert_awaited_once_with(request_body.job_id, "hola", "en")
    synthesis.synthesize.assert_awaited_once_with(request_body.job_id, "hello")
    audio.cleanup.assert_called_once()


@pytest.mark.asyncio
async def test_failure_stops_at_failing_step(request_body, tasks, audio):
    events = []
    _, _, translation, synthesis = tasks
    translation.translate.side_effect = TranslationError("Translation failed: HTTP 403", "google_translate", 403)

    with pytest.raises(TranslationError):
        await VideoPipeline(*tasks).process(request_body, RecordingReporter(events))

    assert events[-1] == ("translating", 60, "es", "hola")
    synthesis.synthesize.assert_not_awaited()
    audio.cleanup.assert_called_once()


@pytest.mark.asyncio
async def test_extract_audio_only(tasks, audio):
    extraction = tasks[0]

    key = await VideoPipeline(*tasks).extract_audio("job", "videos/job.mp4")

    assert key == "audio/job.wav"
    extraction.extract.assert_awaited_once_with("job", "videos/job.mp4")
    audio.cleanup.assert_called_once()
