"""
CRUD operations for database models.

Usage:
    from video_translator.boundary.db.CRUD import transcription_crud

    job = await transcription_crud.get_by_id(db, job_id)
"""

from video_translator.boundary.db.CRUD.base_crud import BaseCRUD
from video_translator.boundary.db.CRUD.transcription_crud import (
    TranscriptionCRUD,
    transcription_crud,
)

__all__ = ["BaseCRUD", "TranscriptionCRUD", "transcription_crud"]
