"""
Transcription task.

Dependencies: video_translator.boundary.providers
System role: Second stage of the processing pipeline
"""

import logging

from video_translator.boundary.providers import TranscriptionResult, WhisperClient

logger = logging.getLogger(__name__)


class TranscriptionTask:
    """Recognise speech in the extracted audio."""

    def __init__(self, client: WhisperClient) -> None:
        self._client = client

    async def transcribe(self, job_id: str, audio_path: str) -> TranscriptionResult:
        result = await self._client.transcribe(audio_path)
        logger.info(
            f"{__name__}:transcribe - Transcription ready",
            extra={"job_id": job_id, "language": result.language},
        )
        return result
