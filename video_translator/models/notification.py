"""
Notification schemas.

Lifecycle notifications surfaced to the user by the stage driver.

Dependencies: pydantic
System role: Notification contract
"""

import enum
import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class NotificationType(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Notification(BaseModel):
    """A single user-facing notification."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    type: NotificationType
    title: str
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    read: bool = False
    job_id: uuid.UUID | None = Field(default=None, description="Job the notification refers to")


class NotificationListResponse(BaseModel):
    notifications: list[Notification]
    unread_count: int
