"""
Tests for the AI provider clients.

Uses httpx.MockTransport and a zero-wait retry policy.

System role: Verification of provider request shapes, retry and error mapping
"""

import asyncio
import json
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from video_translator.boundary.providers import (
    ElevenLabsClient,
    GoogleTranslateClient,
    RetryPolicy,
    WhisperClient,
)
from video_translator.core.exceptions import SynthesisError, TranscriptionError, TranslationError

NO_WAIT = RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0, jitter=0)


class _Recorder:
    """MockTransport handler replaying queued responses and keeping requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def wav_file(tmp_path):
    path = tmp_path / "audio.wav"
    path.write_bytes(b"RIFF0000WAVE")
    return str(path)


class TestWhisperClient:
    @pytest.mark.asyncio
    async def test_transcribe_normalizes_language(self, wav_file):
        # Arrange
        recorder = _Recorder(httpx.Response(200, json={"text": " hola mundo ", "language": "spanish"}))
        client = WhisperClient("sk-test", transport=recorder.transport, retry_policy=NO_WAIT)

        # Act
        result = await client.transcribe(wav_file)

        # Assert
        assert result.text == "hola mundo"
        assert result.language == "es"
        request = recorder.requests[0]
        assert str(request.url) == "https://api.openai.com/v1/audio/transcriptions"
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert b"verbose_json" in request.content
        assert b"whisper-1" in request.content

    @pytest.mark.asyncio
    async def test_audio_is_read_in_a_worker_thread(self, wav_file):
        recorder = _Recorder(httpx.Response(200, json={"text": "hola", "language": "es"}))
        client = WhisperClient("k", transport=recorder.transport, retry_policy=NO_WAIT)

        with patch(
            "video_translator.boundary.providers.whisper_client.asyncio.to_thread",
            wraps=asyncio.to_thread,
        ) as to_thread:
            await client.transcribe(wav_file)

        reader = to_thread.call_args.args[0]
        assert reader.__self__ == Path(wav_file)
        assert b"RIFF0000WAVE" in recorder.requests[0].content

    @pytest.mark.asyncio
    async def test_missing_language_uses_default(self, wav_file):
        recorder = _Recorder(httpx.Response(200, json={"text": "bonjour"}))
        client = WhisperClient("k", default_language="fr", transport=recorder.transport, retry_policy=NO_WAIT)

        assert (await client.transcribe(wav_file)).language == "fr"

    @pytest.mark.asyncio
    async def test_empty_text_fails(self, wav_file):
        recorder = _Recorder(httpx.Response(200, json={"text": "   ", "language": "en"}))
        client = WhisperClient("k", transport=recorder.transport, retry_policy=NO_WAIT)

        with pytest.raises(TranscriptionError, match="no text"):
            await client.transcribe(wav_file)

    @pytest.mark.asyncio
    async def test_retries_transient_errors(self, wav_file):
        recorder = _Recorder(
            httpx.Response(503, text="busy"),
            httpx.Response(429, text="slow down"),
            httpx.Response(200, json={"text": "hello", "language": "en"}),
        )
        client = WhisperClient("k", transport=recorder.transport, retry_policy=NO_WAIT)

        result = await client.transcribe(wav_file)

        assert result.text == "hello"
        assert len(recorder.requests) == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, wav_file):
        recorder = _Recorder(*[httpx.Response(500, text="down") for _ in range(3)])
        client = WhisperClient("k", transport=recorder.transport, retry_policy=NO_WAIT)

        with pytest.raises(TranscriptionError) as exc_info:
            await client.transcribe(wav_file)

        assert exc_info.value.status_code == 500
        assert exc_info.value.provider == "openai"
        assert len(recorder.requests) == 3

    @pytest.mark.asyncio
    async def test_client_errors_are_not_retried(self, wav_file):
        recorder = _Recorder(httpx.Response(401, json={"error": "invalid key"}))
        client = WhisperClient("bad", transport=recorder.transport, retry_policy=NO_WAIT)

        with pytest.raises(TranscriptionError, match="HTTP 401"):
            await client.transcribe(wav_file)

        assert len(recorder.requests) == 1


class TestGoogleTranslateClient:
    @pytest.mark.asyncio
    async def test_translate_request_shape(self):
        recorder = _Recorder(
            httpx.Response(200, json={"data": {"translations": [{"translatedText": "hello world"}]}})
        )
        client = GoogleTranslateClient("g-key", transport=recorder.transport, retry_policy=NO_WAIT)

        translated = await client.translate("hola mundo", "en")

        assert translated == "hello world"
        request = recorder.requests[0]
        assert request.url.params["key"] == "g-key"
        assert json.loads(request.content) == {"q": "hola mundo", "target": "en", "format": "text"}

    @pytest.mark.asyncio
    async def test_malformed_response(self):
        recorder = _Recorder(httpx.Response(200, json={"data": {"translations": []}}))
        client = GoogleTranslateClient("g-key", transport=recorder.transport, retry_policy=NO_WAIT)

        with pytest.raises(TranslationError, match="translatedText"):
            await client.translate("hola", "en")

    @pytest.mark.asyncio
    async def test_http_error(self):
        recorder = _Recorder(httpx.Response(403, text="forbidden"))
        client = GoogleTranslateClient("g-key", transport=recorder.transport, retry_policy=NO_WAIT)

        with pytest.raises(TranslationError) as exc_info:
            await client.translate("hola", "en")

        assert exc_info.value.status_code == 403


class TestElevenLabsClient:
    @pytest.mark.asyncio
    async def test_synthesize_request_shape(self):
        recorder = _Recorder(httpx.Response(200, content=b"ID3audio"))
        client = ElevenLabsClient("xi-key", transport=recorder.transport, retry_policy=NO_WAIT)

        audio = await client.synthesize("hello")

        assert audio == b"ID3audio"
        request = recorder.requests[0]
        assert str(request.url) == "https://api.elevenlabs.io/v1/text-to-speech/pNInz6obpgDQGcFmaJgB"
        assert request.headers["xi-api-key"] == "xi-key"
        assert request.headers["Accept"] == "audio/mpeg"
        assert json.loads(request.content) == {
            "text": "hello",
            "model_id": "eleven_multilingual_v2",
            "voice_settings": {"stability": 0.5, "similarity_boost": 0.5},
        }

    @pytest.mark.asyncio
    async def test_empty_audio(self):
        recorder = _Recorder(httpx.Response(200, content=b""))
        client = ElevenLabsClient("xi-key", transport=recorder.transport, retry_policy=NO_WAIT)

        with pytest.raises(SynthesisError):
            await client.synthesize("hello")

    @pytest.mark.asyncio
    async def test_network_error_after_retries(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            raise httpx.ConnectError("refused", request=request)

        client = ElevenLabsClient("xi-key", transport=httpx.MockTransport(handler), retry_policy=NO_WAIT)

        with pytest.raises(SynthesisError, match="ConnectError"):
            await client.synthesize("hello")

        assert len(attempts) == 3
