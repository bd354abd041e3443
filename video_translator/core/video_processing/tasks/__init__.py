"""
Pipeline tasks, one per processing step.
"""

from video_translator.core.video_processing.tasks.audio_extraction_task import (
    AudioExtractionTask,
    ExtractedAudio,
)
from video_translator.core.video_processing.tasks.synthesis_task import SynthesisTask
from video_translator.core.video_processing.tasks.transcription_task import TranscriptionTask
from video_translator.core.video_processing.tasks.translation_task import TranslationTask

__all__ = [
    "AudioExtractionTask",
    "ExtractedAudio",
    "SynthesisTask",
    "TranscriptionTask",
    "TranslationTask",
]
