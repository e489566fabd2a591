from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from ..core.constants import MEET_LINKS_ROOT
from ..database.store import RealtimeStore


class MeetLinkRepository(Protocol):
    def save(self, course_id: str, data: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError


class RealtimeMeetLinkRepository(MeetLinkRepository):
    """One meeting link per course at ``GoogleMeet/{courseId}``."""

    def __init__(self, store: RealtimeStore):
        self._store = store

    def save(self, course_id: str, data: Mapping[str, Any]) -> None:
        self._store.set(f"{MEET_LINKS_ROOT}/{course_id}", dict(data))

    def list_all(self) -> Sequence[dict]:
        rows = self._store.get(MEET_LINKS_ROOT) or {}
        return [dict(row) for row in rows.values() if isinstance(row, dict)]
