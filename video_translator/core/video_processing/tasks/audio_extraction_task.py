"""
Audio extraction task.

Downloads the uploaded video from object storage, strips the audio track
with ffmpeg (mono WAV at the ASR sample rate) and uploads it as
audio/{job_id}.wav.

Dependencies: asyncio subprocess (ffmpeg), boto3 via ObjectStorageClient
System role: First stage of the processing pipeline
"""

import asyncio
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import PurePosixPath

from video_translator.boundary.storage import ObjectStorageClient, audio_key
from video_translator.core.exceptions import AudioExtractionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedAudio:
    """Extracted audio, both on local disk and in storage."""

    local_path: str
    storage_key: str
    work_dir: str

    def cleanup(self) -> None:
        shutil.rmtree(self.work_dir, ignore_errors=True)


class AudioExtractionTask:
    """Produce the WAV track of a stored video."""

    def __init__(
        self,
        storage: ObjectStorageClient,
        ffmpeg_binary: str = "ffmpeg",
        sample_rate: int = 16000,
        timeout: float = 600.0,
    ) -> None:
        self._storage = storage
        self._ffmpeg_binary = ffmpeg_binary
        self._sample_rate = sample_rate
        self._timeout = timeout

    async def extract(self, job_id: str, video_key: str) -> ExtractedAudio:
        """
        Extract and upload the audio of `video_key`.

        The caller owns the returned work directory and must call
        `cleanup()` once the local WAV is no longer needed.

        Raises:
            StorageError: Video download or audio upload failed
            AudioExtractionError: ffmpeg failed or is not installed
        """
        work_dir = tempfile.mkdtemp(prefix="video_pipeline_")
        try:
            video_name = PurePosixPath(video_key).name or f"{job_id}.mp4"
            video_path = os.path.join(work_dir, video_name)
            wav_path = os.path.join(work_dir, f"{job_id}.wav")

            await asyncio.to_thread(self._storage.download_file, video_key, video_path)
            await self._run_ffmpeg(job_id, video_path, wav_path)

            key = audio_key(job_id)
            await asyncio.to_thread(self._storage.upload_file, key, wav_path, "audio/wav")
        except BaseException:
            shutil.rmtree(work_dir, ignore_errors=True)
            raise

        logger.info(
            f"{__name__}:extract - Audio extracted",
            extra={"job_id": job_id, "audio_key": key},
        )
        return ExtractedAudio(local_path=wav_path, storage_key=key, work_dir=work_dir)

    async def _run_ffmpeg(self, job_id: str, video_path: str, wav_path: str) -> None:
        cmd = [
            self._ffmpeg_binary,
            "-y",
            "-i", video_path,
            "-vn",
            "-ac", "1",
            "-ar", str(self._sample_rate),
            "-c:a", "pcm_s16le",
            "-loglevel", "error",
            wav_path,
        ]
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise AudioExtractionError(
                f"ffmpeg binary not found: {self._ffmpeg_binary}", job_id
            ) from e

        try:
            _, stderr = await asyncio.wait_for(process.communicate(), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise AudioExtractionError(
                f"Audio extraction timed out after {self._timeout:.0f}s", job_id
            ) from e

        if process.returncode != 0:
            detail = stderr.decode(errors="replace").strip()[-500:] if stderr else "unknown ffmpeg error"
            raise AudioExtractionError(f"Audio extraction failed: {detail}", job_id)
