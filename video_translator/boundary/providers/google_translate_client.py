"""
Google Translate v2 client.

Dependencies: httpx, tenacity (via ProviderClient)
System role: Translation step of the processing backend
"""

import logging

import httpx

from video_translator.boundary.providers.base import ProviderClient, RetryPolicy
from video_translator.core.exceptions import TranslationError

logger = logging.getLogger(__name__)


class GoogleTranslateClient(ProviderClient):
    """Client for the v2 REST endpoint authenticated with an API key."""

    def __init__(
        self,
        api_key: str,
        url: str = "https://translation.googleapis.com/language/translate/v2",
        timeout: float = 60.0,
        retry_policy: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__("google_translate", timeout, retry_policy, transport)
        self._api_key = api_key
        self._url = url

    async def translate(self, text: str, target_language: str) -> str:
        """
        Translate plain text into `target_language`.

        Raises:
            TranslationError: When the request fails or the response has no translation
        """
        try:
            response = await self._post(
                self._url,
                params={"key": self._api_key},
                json={"q": text, "target": target_language, "format": "text"},
            )
        except httpx.HTTPError as e:
            message, status_code = self._describe(e)
            raise TranslationError(f"Translation failed: {message}", self.name, status_code) from e

        try:
            translated = response.json()["data"]["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise TranslationError("Translation response missing translatedText", self.name) from e

        logger.info(
            f"{__name__}:translate - Translated {len(text)} chars",
            extra={"target_language": target_language},
        )
        return translated
