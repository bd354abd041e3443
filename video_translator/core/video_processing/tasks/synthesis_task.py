"""
Speech synthesis task.

Renders the translated text to MP3, stores it as generated/{job_id}.mp3
and returns its public URL.

Dependencies: video_translator.boundary.providers, boto3 via ObjectStorageClient
System role: Final stage of the processing pipeline
"""

import asyncio
import logging

from video_translator.boundary.providers import ElevenLabsClient
from video_translator.boundary.storage import ObjectStorageClient, generated_audio_key

logger = logging.getLogger(__name__)


class SynthesisTask:
    """Generate and publish the translated audio."""

    def __init__(self, client: ElevenLabsClient, storage: ObjectStorageClient) -> None:
        self._client = client
        self._storage = storage

    async def synthesize(self, job_id: str, text: str) -> tuple[str, str]:
        """
        Returns:
            tuple[str, str]: (object key, public URL)
        """
        audio = await self._client.synthesize(text)
        key = generated_audio_key(job_id)
        await asyncio.to_thread(self._storage.upload_bytes, key, audio, "audio/mpeg")
        url = self._storage.get_public_url(key)
        logger.info(
            f"{__name__}:synthesize - Generated audio stored",
            extra={"job_id": job_id, "audio_key": key, "size_bytes": len(audio)},
        )
        return key, url
