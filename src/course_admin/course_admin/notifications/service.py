from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import now_local
from ..common.validators import require_key_segment, require_non_empty
from .repository import NotificationRepository


class NotificationService:
    def __init__(self, notifications: NotificationRepository):
        self._notifications = notifications

    def create(self, message, *, now: datetime | None = None) -> dict:
        message = require_non_empty(message, "message")
        timestamp = (now or now_local()).isoformat()
        notification_id = self._notifications.create(message=message, timestamp=timestamp)
        return {"id": notification_id, "message": message, "timestamp": timestamp}

    def list_all(self) -> list[dict]:
        return list(self._notifications.list_all())

    def update(self, notification_id: str, message, *, now: datetime | None = None) -> None:
        notification_id = require_key_segment(notification_id, "Notification id")
        message = require_non_empty(message, "message")
        self._notifications.update(notification_id, message=message, timestamp=(now or now_local()).isoformat())

    def delete(self, notification_id: str) -> None:
        self._notifications.delete(require_key_segment(notification_id, "Notification id"))
