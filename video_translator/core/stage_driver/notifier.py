"""
Notifiers.

The stage driver reports lifecycle events through the Notifier protocol.
NotificationCenter keeps them in memory for the API (newest first, with
read tracking); LoggingNotifier writes them to the log.

Dependencies: video_translator.models.notification
System role: Event surface between the stage driver and the user
"""

import logging
import uuid
from typing import Protocol

from video_translator.models.notification import Notification, NotificationType

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    NotificationType.SUCCESS: logging.INFO,
    NotificationType.INFO: logging.INFO,
    NotificationType.WARNING: logging.WARNING,
    NotificationType.ERROR: logging.ERROR,
}


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class LoggingNotifier:
    """Writes each notification to the log."""

    def notify(self, notification: Notification) -> None:
        logger.log(
            _LOG_LEVELS[notification.type],
            f"{__name__}:notify - {notification.title}: {notification.message}",
            extra={
                "notification_type": notification.type.value,
                "job_id": str(notification.job_id) if notification.job_id else None,
            },
        )


class NotificationCenter:
    """
    In-memory notification list.

    Like the job store, the list is an immutable tuple replaced on every
    change. Oldest entries are dropped beyond `max_items`.
    """

    def __init__(self, max_items: int = 100) -> None:
        self._max_items = max_items
        self._items: tuple[Notification, ...] = ()

    def notify(self, notification: Notification) -> None:
        self._items = (notification, *self._items)[: self._max_items]

    @property
    def notifications(self) -> tuple[Notification, ...]:
        return self._items

    @property
    def unread_count(self) -> int:
        return sum(1 for item in self._items if not item.read)

    def mark_as_read(self, notification_id: uuid.UUID) -> bool:
        """Mark one notification read. Returns False for unknown ids."""
        if not any(item.id == notification_id for item in self._items):
            return False
        self._items = tuple(
            item.model_copy(update={"read": True}) if item.id == notification_id else item
            for item in self._items
        )
        return True

    def clear_all(self) -> None:
        self._items = ()


class CompositeNotifier:
    """Forwards every notification to several notifiers in order."""

    def __init__(self, *notifiers: Notifier) -> None:
        self._notifiers = notifiers

    def notify(self, notification: Notification) -> None:
        for notifier in self._notifiers:
            notifier.notify(notification)
