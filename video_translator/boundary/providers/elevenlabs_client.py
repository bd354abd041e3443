"""
ElevenLabs text-to-speech client.

Dependencies: httpx, tenacity (via ProviderClient)
System role: Speech synthesis step of the processing backend
"""

import logging

import httpx

from video_translator.boundary.providers.base import ProviderClient, RetryPolicy
from video_translator.core.exceptions import SynthesisError

logger = logging.getLogger(__name__)


class ElevenLabsClient(ProviderClient):
    """Client for POST {base_url}/text-to-speech/{voice_id}."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.elevenlabs.io/v1",
        voice_id: str = "pNInz6obpgDQGcFmaJgB",
        model_id: str = "eleven_multilingual_v2",
        stability: float = 0.5,
        similarity_boost: float = 0.5,
        timeout: float = 300.0,
        retry_policy: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__("elevenlabs", timeout, retry_policy, transport)
        self._api_key = api_key
        self._url = f"{base_url.rstrip('/')}/text-to-speech/{voice_id}"
        self._model_id = model_id
        self._voice_settings = {"stability": stability, "similarity_boost": similarity_boost}

    async def synthesize(self, text: str) -> bytes:
        """
        Render `text` as MP3 speech.

        Raises:
            SynthesisError: When the request fails or returns no audio
        """
        try:
            response = await self._post(
                self._url,
                headers={
                    "Accept": "audio/mpeg",
                    "xi-api-key": self._api_key,
                },
                json={
                    "text": text,
                    "model_id": self._model_id,
                    "voice_settings": self._voice_settings,
                },
            )
        except httpx.HTTPError as e:
            message, status_code = self._describe(e)
            raise SynthesisError(f"Speech synthesis failed: {message}", self.name, status_code) from e

        if not response.content:
            raise SynthesisError("Speech synthesis returned no audio", self.name)

        logger.info(f"{__name__}:synthesize - Generated {len(response.content)} bytes of audio")
        return response.content
