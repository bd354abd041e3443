"""
OpenAI Whisper speech recognition client.

Uploads an audio file to the transcriptions endpoint and returns the text
together with the detected language.

Dependencies: httpx, tenacity (via ProviderClient)
System role: Transcription step of the processing backend
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from video_translator.boundary.providers.base import ProviderClient, RetryPolicy
from video_translator.core.exceptions import TranscriptionError
from video_translator.models.language import normalize_language

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptionResult:
    text: str
    language: str


class WhisperClient(ProviderClient):
    """Client for POST {base_url}/audio/transcriptions."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        model: str = "whisper-1",
        default_language: str = "es",
        timeout: float = 300.0,
        retry_policy: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__("openai", timeout, retry_policy, transport)
        self._api_key = api_key
        self._url = f"{base_url.rstrip('/')}/audio/transcriptions"
        self._model = model
        self._default_language = default_language

    async def transcribe(self, audio_path: str) -> TranscriptionResult:
        """
        Transcribe a WAV file.

        Args:
            audio_path: Local path of the extracted audio

        Returns:
            TranscriptionResult: Text and ISO language code (falls back to
                the default language when the provider reports none)

        Raises:
            TranscriptionError: When the request fails or returns no text
        """
        audio = Path(audio_path)
        content = await asyncio.to_thread(audio.read_bytes)
        try:
            response = await self._post(
                self._url,
                headers={"Authorization": f"Bearer {self._api_key}"},
                data={"model": self._model, "response_format": "verbose_json"},
                files={"file": (audio.name, content, "audio/wav")},
            )
        except httpx.HTTPError as e:
            message, status_code = self._describe(e)
            raise TranscriptionError(
                f"Transcription failed: {message}", self.name, status_code
            ) from e

        payload = response.json()
        text = (payload.get("text") or "").strip()
        if not text:
            raise TranscriptionError("Transcription returned no text", self.name)

        language = normalize_language(payload.get("language"), self._default_language)
        logger.info(
            f"{__name__}:transcribe - Transcribed {len(text)} chars",
            extra={"language": language},
        )
        return TranscriptionResult(text=text, language=language)
