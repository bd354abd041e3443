"""
Pipeline result model for video processing.

Dependencies: pydantic
System role: Return type for VideoPipeline.process()
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """Result of a successful pipeline run."""

    job_id: str = Field(description="Job record ID")
    audio_url: str = Field(description="Public URL of the generated speech")
    audio_key: str = Field(description="Object key of the generated speech")
    original_language: str = Field(description="Detected source language")
    transcription_text: str = Field(description="Recognised source text")
    translated_text: str = Field(description="Text sent to speech synthesis")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
