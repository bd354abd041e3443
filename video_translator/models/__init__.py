"""
API and domain schemas.

Exports:
  - JobRecord: Immutable job record shared by the stage driver and services
  - Notification, NotificationType: Lifecycle notifications
  - SUPPORTED_LANGUAGES: Target languages accepted by the API
"""

from video_translator.models.job import JobRecord
from video_translator.models.language import SUPPORTED_LANGUAGES, is_supported_language
from video_translator.models.notification import Notification, NotificationType

__all__ = [
    "JobRecord",
    "Notification",
    "NotificationType",
    "SUPPORTED_LANGUAGES",
    "is_supported_language",
]
