"""
Translation task.

Dependencies: video_translator.boundary.providers
System role: Third stage of the processing pipeline
"""

import logging

from video_translator.boundary.providers import GoogleTranslateClient

logger = logging.getLogger(__name__)


class TranslationTask:
    """Translate the transcription into the job's target language."""

    def __init__(self, client: GoogleTranslateClient) -> None:
        self._client = client

    async def translate(self, job_id: str, text: str, target_language: str) -> str:
        translated = await self._client.translate(text, target_language)
        logger.info(
            f"{__name__}:translate - Translation ready",
            extra={"job_id": job_id, "target_language": target_language},
        )
        return translated
