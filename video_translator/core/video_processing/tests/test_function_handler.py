"""Unit tests for the process-video and extract-audio handlers."""

import json
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from video_translator.core.exceptions import TranscriptionError
from video_translator.core.video_processing.function_handler import (
    UNKNOWN_ERROR_MESSAGE,
    handle_extract_audio,
    handle_process_video,
    preflight_response,
)


@pytest.fixture
def job_id():
    return str(uuid4())


@pytest.fixture
def body(job_id):
    return json.dumps({"jobId": job_id, "filePath": f"videos/{job_id}.mp4", "targetLanguage": "en"})


@pytest.fixture
def pipeline():
    pipeline = AsyncMock()
    pipeline.process = AsyncMock(return_value=MagicMock(audio_url="https://cdn/generated/x.mp3"))
    pipeline.extract_audio = AsyncMock(return_value="audio/x.wav")
    return pipeline


@pytest.fixture
def reporter():
    return AsyncMock()


def test_preflight():
    response = preflight_response()

    assert response.status_code == 200
    assert response.body == "ok"


@pytest.mark.asyncio
async def test_process_video_success(body, pipeline, reporter):
    response = await handle_process_video(body, pipeline, reporter)

    assert response.status_code == 200
    assert response.body == {"success": True, "audioUrl": "https://cdn/generated/x.mp3"}
    reporter.mark_failed.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "not json",
        json.dumps({"filePath": "videos/x.mp4", "targetLanguage": "en"}),
        json.dumps({"jobId": "not-a-uuid", "filePath": "videos/x.mp4", "targetLanguage": "en"}),
    ],
)
async def test_malformed_body_writes_nothing(raw, pipeline, reporter):
    response = await handle_process_video(raw, pipeline, reporter)

    assert response.status_code == 400
    assert "error" in response.body
    pipeline.process.assert_not_awaited()
    reporter.mark_failed.assert_not_awaited()


@pytest.mark.asyncio
async def test_pipeline_failure_is_recorded(body, job_id, pipeline, reporter):
    # Arrange
    pipeline.process.side_effect = TranscriptionError("Transcription failed: HTTP 401", "openai", 401)

    # Act
    response = await handle_process_video(body, pipeline, reporter)

    # Assert
    assert response.status_code == 500
    assert response.body == {"error": "Transcription failed: HTTP 401"}
    reporter.mark_failed.assert_awaited_once_with(job_id, "Transcription failed: HTTP 401")


@pytest.mark.asyncio
async def test_recording_failure_still_returns_error(body, pipeline, reporter):
    pipeline.process.side_effect = RuntimeError("boom")
    reporter.mark_failed.side_effect = ConnectionError("database down")

    response = await handle_process_video(body, pipeline, reporter)

    assert response.status_code == 500
    assert response.body == {"error": "boom"}


@pytest.mark.asyncio
async def test_exception_without_message(body, job_id, pipeline, reporter):
    pipeline.process.side_effect = RuntimeError()

    response = await handle_process_video(body, pipeline, reporter)

    assert response.body == {"error": UNKNOWN_ERROR_MESSAGE}
    reporter.mark_failed.assert_awaited_once_with(job_id, UNKNOWN_ERROR_MESSAGE)


@pytest.mark.asyncio
async def test_extract_audio_success(job_id, pipeline):
    response = await handle_extract_audio({"jobId": job_id, "filePath": "videos/x.mp4"}, pipeline)

    assert response.status_code == 200
    assert response.body == {"success": True, "audioPath": "audio/x.wav"}
    pipeline.extract_audio.assert_awaited_once_with(job_id, "videos/x.mp4")


@pytest.mark.asyncio
async def test_extract_audio_errors(job_id, pipeline):
    pipeline.extract_audio.side_effect = RuntimeError("ffmpeg exploded")

    bad = await handle_extract_audio("{}", pipeline)
    failed = await handle_extract_audio({"jobId": job_id, "filePath": "videos/x.mp4"}, pipeline)

    assert bad.status_code == 400
    assert failed.status_code == 500
    assert failed.body == {"error": "ffmpeg exploded"}
