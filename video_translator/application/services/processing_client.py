"""
Processing backend client.

Invokes the process-video and extract-audio functions over HTTP.

Dependencies: httpx, video_translator.configs
System role: Client side of the processing backend contract
"""

import logging

import httpx

from video_translator.configs.functions import FunctionsSettings
from video_translator.core.exceptions import ProcessingError

logger = logging.getLogger(__name__)


class ProcessingClient:
    """HTTP client for the processing backend functions."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 900.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: FunctionsSettings) -> "ProcessingClient":
        return cls(settings.base_url, settings.api_key, settings.timeout_seconds)

    async def process_video(self, job_id: str, file_path: str, target_language: str) -> str:
        """
        Run the full pipeline for a job.

        Returns:
            str: Public URL of the translated audio

        Raises:
            ProcessingError: The function failed or could not be reached
        """
        payload = await self._invoke(
            "process-video",
            job_id,
            {"jobId": job_id, "filePath": file_path, "targetLanguage": target_language},
        )
        return payload["audioUrl"]

    async def extract_audio(self, job_id: str, file_path: str) -> str:
        """
        Returns:
            str: Object key of the extracted audio
        """
        payload = await self._invoke("extract-audio", job_id, {"jobId": job_id, "filePath": file_path})
        return payload["audioPath"]

    async def _invoke(self, function: str, job_id: str, body: dict) -> dict:
        url = f"{self._base_url}/{function}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(url, json=body, headers=self._headers)
        except httpx.HTTPError as e:
            raise ProcessingError(f"Processing backend unreachable: {e}", job_id) from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.is_error or "error" in payload:
            message = payload.get("error") or f"Processing backend returned HTTP {response.status_code}"
            logger.warning(
                f"{__name__}:_invoke - {function} failed: {message}",
                extra={"job_id": job_id, "status_code": response.status_code},
            )
            raise ProcessingError(message, job_id, details={"status_code": response.status_code})
        return payload
