"""
Tests for the notification center and notifiers.

System role: Verification of the notification event surface
"""

import logging
import uuid

from video_translator.core.stage_driver import (
    CompositeNotifier,
    LoggingNotifier,
    NotificationCenter,
)
from video_translator.models.notification import Notification, NotificationType


def _notification(title: str = "File added", type_: NotificationType = NotificationType.INFO) -> Notification:
    return Notification(type=type_, title=title, message="clip.mp4")


class TestNotificationCenter:
    def test_newest_first_and_unread_count(self):
        center = NotificationCenter()
        first, second = _notification("first"), _notification("second")

        center.notify(first)
        center.notify(second)

        assert [n.title for n in center.notifications] == ["second", "first"]
        assert center.unread_count == 2

    def test_mark_as_read(self):
        # Arrange
        center = NotificationCenter()
        notification = _notification()
        center.notify(notification)

        # Act
        marked = center.mark_as_read(notification.id)

        # Assert
        assert marked is True
        assert center.notifications[0].read is True
        assert center.unread_count == 0
        assert notification.read is False

    def test_mark_unknown_returns_false(self):
        assert NotificationCenter().mark_as_read(uuid.uuid4()) is False

    def test_clear_all(self):
        center = NotificationCenter()
        center.notify(_notification())

        center.clear_all()

        assert center.notifications == ()

    def test_drops_oldest_beyond_limit(self):
        center = NotificationCenter(max_items=2)
        for title in ("a", "b", "c"):
            center.notify(_notification(title))

        assert [n.title for n in center.notifications] == ["c", "b"]


class TestCompositeNotifier:
    def test_forwards_to_all(self, caplog):
        center = NotificationCenter()
        notifier = CompositeNotifier(center, LoggingNotifier())

        with caplog.at_level(logging.ERROR):
            notifier.notify(_notification("Processing failed", NotificationType.ERROR))

        assert len(center.notifications) == 1
        assert "Processing failed" in caplog.text
