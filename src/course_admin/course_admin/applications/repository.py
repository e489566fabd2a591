from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ..core.constants import APPLICATIONS_ROOT
from ..database.store import RealtimeStore


class ApplicationRepository(Protocol):
    def save(self, application_id: str, data: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def get(self, application_id: str) -> Optional[dict]:
        raise NotImplementedError

    def list_all(self) -> dict[str, dict]:
        raise NotImplementedError

    def set_status(self, application_id: str, status: str) -> None:
        raise NotImplementedError


class RealtimeApplicationRepository(ApplicationRepository):
    def __init__(self, store: RealtimeStore):
        self._store = store

    def save(self, application_id: str, data: Mapping[str, Any]) -> None:
        self._store.set(f"{APPLICATIONS_ROOT}/{application_id}", dict(data))

    def get(self, application_id: str) -> Optional[dict]:
        return self._store.get(f"{APPLICATIONS_ROOT}/{application_id}") or None

    def list_all(self) -> dict[str, dict]:
        return self._store.get(APPLICATIONS_ROOT) or {}

    def set_status(self, application_id: str, status: str) -> None:
        self._store.update(f"{APPLICATIONS_ROOT}/{application_id}", {"status": status})
