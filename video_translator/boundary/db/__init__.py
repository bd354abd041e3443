"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Declarative base and column mixins
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - TranscriptionModel: Persisted job record
  - transcription_crud: CRUD singleton

Dependencies: sqlalchemy, video_translator.configs
System role: Database adapter for persisted translation jobs
"""

from video_translator.boundary.db.base import Base, TimestampMixin, UUIDMixin
from video_translator.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from video_translator.boundary.db.models import TranscriptionModel
from video_translator.boundary.db.CRUD import BaseCRUD, TranscriptionCRUD, transcription_crud

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "TranscriptionModel",
    "BaseCRUD",
    "TranscriptionCRUD",
    "transcription_crud",
]
