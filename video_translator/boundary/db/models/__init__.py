"""
Database models package.

Exports:
  - TranscriptionModel: Persisted translation job

Dependencies: sqlalchemy, video_translator.boundary.db.base
System role: Database model definitions for domain entities
"""

from video_translator.boundary.db.models.transcription_model import TranscriptionModel

__all__ = ["TranscriptionModel"]
