"""
Application services.

Exports:
  - JobService: Stage-driver-backed job operations and notifications
  - TranscriptionService: Persisted jobs, uploads and backend invocation
  - ProcessingClient: HTTP client for the processing backend functions
"""

from video_translator.application.services.job_service import JobService
from video_translator.application.services.processing_client import ProcessingClient
from video_translator.application.services.transcription_service import TranscriptionService

__all__ = ["JobService", "ProcessingClient", "TranscriptionService"]
