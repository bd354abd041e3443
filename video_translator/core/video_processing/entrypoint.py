"""
Video pipeline orchestrator.

Coordinates audio extraction, transcription, translation and speech
synthesis, reporting the job's status after every step. The first failing
step aborts the run; the caller records the failure.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from video_translator.boundary.providers import (
    ElevenLabsClient,
    GoogleTranslateClient,
    RetryPolicy,
    WhisperClient,
)
from video_translator.boundary.storage import ObjectStorageClient
from video_translator.core.video_processing.configs import (
    ProcessingSettings,
    get_processing_settings,
)
from video_translator.core.video_processing.lambda_utils.status_manager import StatusReporter
from video_translator.core.video_processing.models import PipelineResult, ProcessVideoRequest
from video_translator.core.video_processing.tasks import (
    AudioExtractionTask,
    ExtractedAudio,
    SynthesisTask,
    TranscriptionTask,
    TranslationTask,
)

logger = logging.getLogger(__name__)


class VideoPipeline:
    """Orchestrate extract -> transcribe -> translate -> synthesize."""

    def __init__(
        self,
        audio_extraction: AudioExtractionTask,
        transcription: TranscriptionTask,
        translation: TranslationTask,
        synthesis: SynthesisTask,
    ) -> None:
        self._audio_extraction = audio_extraction
        self._transcription = transcription
        self._translation = translation
        self._synthesis = synthesis

    @classmethod
    def from_settings(
        cls,
        settings: ProcessingSettings | None = None,
        storage: ObjectStorageClient | None = None,
    ) -> "VideoPipeline":
        """
        Build the pipeline with real provider clients.

        Args:
            settings: Processing settings (loaded from environment if None)
            storage: Storage client (built from settings if None)
        """
        settings = settings or get_processing_settings()
        storage = storage or ObjectStorageClient(
            bucket=settings.storage_bucket,
            region=settings.storage_region,
            endpoint_url=settings.storage_endpoint_url,
            public_base_url=settings.storage_public_base_url,
        )
        retry_policy = RetryPolicy(
            max_attempts=settings.max_attempts,
            initial_wait=settings.retry_initial_wait,
            max_wait=settings.retry_max_wait,
        )
        return cls(
            audio_extraction=AudioExtractionTask(
                storage,
                ffmpeg_binary=settings.ffmpeg_binary,
                sample_rate=settings.audio_sample_rate,
                timeout=settings.ffmpeg_timeout,
            ),
            transcription=TranscriptionTask(
                WhisperClient(
                    api_key=settings.openai_api_key,
                    base_url=settings.openai_base_url,
                    model=settings.whisper_model,
                    default_language=settings.default_source_language,
                    timeout=settings.transcription_timeout,
                    retry_policy=retry_policy,
                )
            ),
            translation=TranslationTask(
                GoogleTranslateClient(
                    api_key=settings.google_translate_api_key,
                    url=settings.google_translate_url,
                    timeout=settings.translation_timeout,
                    retry_policy=retry_policy,
                )
            ),
            synthesis=SynthesisTask(
                ElevenLabsClient(
                    api_key=settings.elevenlabs_api_key,
                    base_url=settings.elevenlabs_base_url,
                    voice_id=settings.voice_id,
                    model_id=settings.tts_model_id,
                    stability=settings.voice_stability,
                    similarity_boost=settings.voice_similarity_boost,
                    timeout=settings.synthesis_timeout,
                    retry_policy=retry_policy,
                ),
                storage,
            ),
        )

    async def process(self, request: ProcessVideoRequest, reporter: StatusReporter) -> PipelineResult:
        """
        Run all steps for one job.

        Args:
            request: Parsed process-video request
            reporter: Receives the job's status after each step

        Returns:
            PipelineResult: Public audio URL and intermediate texts

        Raises:
            StorageError: Object storage failed
            AudioExtractionError: ffmpeg failed
            ProviderError: A provider failed after its retries
            JobNotFoundError: The job record does not exist
        """
        start_time = time.perf_counter()
        job_id = request.job_id
        audio: ExtractedAudio | None = None

        try:
            await reporter.mark_processing(job_id)

            audio = await self._audio_extraction.extract(job_id, request.file_path)
            await reporter.mark_transcribing(job_id)

            transcription = await self._transcription.transcribe(job_id, audio.local_path)
            await reporter.mark_translating(job_id, transcription.language, transcription.text)

            translated = await self._translation.translate(
                job_id, transcription.text, request.target_language
            )
            await reporter.mark_translated(job_id)

            audio_key, audio_url = await self._synthesis.synthesize(job_id, translated)
            await reporter.mark_completed(job_id, audio_url)

            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                f"{__name__}:process - Job completed",
                extra={"job_id": job_id, "processing_time_ms": round(elapsed_ms, 2)},
            )
            return PipelineResult(
                job_id=job_id,
                audio_url=audio_url,
                audio_key=audio_key,
                original_language=transcription.language,
                transcription_text=transcription.text,
                translated_text=translated,
                processing_time_ms=elapsed_ms,
            )
        finally:
            if audio is not None:
                audio.cleanup()

    async def extract_audio(self, job_id: str, file_path: str) -> str:
        """
        Run only the extraction step.

        Returns:
            str: Object key of the extracted WAV
        """
        audio = await self._audio_extraction.extract(job_id, file_path)
        audio.cleanup()
        return audio.storage_key
