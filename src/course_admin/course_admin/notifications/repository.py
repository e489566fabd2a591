from __future__ import annotations

from typing import Protocol, Sequence

from ..core.constants import NOTIFICATIONS_ROOT
from ..database.store import RealtimeStore


class NotificationRepository(Protocol):
    def create(self, *, message: str, timestamp: str) -> str:
        raise NotImplementedError

    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError

    def update(self, notification_id: str, *, message: str, timestamp: str) -> None:
        raise NotImplementedError

    def delete(self, notification_id: str) -> None:
        raise NotImplementedError


class RealtimeNotificationRepository(NotificationRepository):
    def __init__(self, store: RealtimeStore):
        self._store = store

    def create(self, *, message: str, timestamp: str) -> str:
        return self._store.push(NOTIFICATIONS_ROOT, {"message": message, "timestamp": timestamp})

    def list_all(self) -> Sequence[dict]:
        rows = self._store.get(NOTIFICATIONS_ROOT) or {}
        return [{"id": key, **row} for key, row in rows.items() if isinstance(row, dict)]

    def update(self, notification_id: str, *, message: str, timestamp: str) -> None:
        self._store.update(f"{NOTIFICATIONS_ROOT}/{notification_id}", {"message": message, "timestamp": timestamp})

    def delete(self, notification_id: str) -> None:
        self._store.delete(f"{NOTIFICATIONS_ROOT}/{notification_id}")
