"""
Object storage boundary.

Exports:
  - ObjectStorageClient: S3-compatible bucket operations
  - video_key, audio_key, generated_audio_key: Deterministic object keys
"""

from video_translator.boundary.storage.s3_client import (
    ObjectStorageClient,
    audio_key,
    generated_audio_key,
    video_key,
)

__all__ = ["ObjectStorageClient", "audio_key", "generated_audio_key", "video_key"]
