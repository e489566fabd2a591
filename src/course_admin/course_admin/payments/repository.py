from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ..core.constants import PAYMENTS_ROOT
from ..database.store import RealtimeStore


class PaymentRepository(Protocol):
    def save(self, course: str, application_id: str, data: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def update(self, course: str, application_id: str, data: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def get(self, course: str, application_id: str) -> Optional[dict]:
        raise NotImplementedError


class RealtimePaymentRepository(PaymentRepository):
    """Payments stored at ``payments/{course}/{applicationId}``."""

    def __init__(self, store: RealtimeStore):
        self._store = store

    def save(self, course: str, application_id: str, data: Mapping[str, Any]) -> None:
        self._store.set(f"{PAYMENTS_ROOT}/{course}/{application_id}", dict(data))

    def update(self, course: str, application_id: str, data: Mapping[str, Any]) -> None:
        self._store.update(f"{PAYMENTS_ROOT}/{course}/{application_id}", dict(data))

    def get(self, course: str, application_id: str) -> Optional[dict]:
        return self._store.get(f"{PAYMENTS_ROOT}/{course}/{application_id}") or None
