"""
Processing backend request and result models.
"""

from video_translator.core.video_processing.models.pipeline_result import PipelineResult
from video_translator.core.video_processing.models.request import (
    ExtractAudioRequest,
    ProcessVideoRequest,
)

__all__ = ["ExtractAudioRequest", "PipelineResult", "ProcessVideoRequest"]
