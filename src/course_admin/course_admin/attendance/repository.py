from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, Sequence

from ..core.constants import ATTENDANCE_ROOT
from ..database.store import RealtimeStore
from .aggregator import to_store_updates
from .model import CourseAttendanceDay

logger = logging.getLogger(__name__)


class AttendanceRepository(Protocol):
    def save_days(self, days: Sequence[CourseAttendanceDay]) -> None:
        raise NotImplementedError

    def get_day(self, course_name: str, date_key: str) -> Optional[dict]:
        raise NotImplementedError

    def get_course(self, course_name: str) -> Optional[dict]:
        raise NotImplementedError

    def get_all(self) -> Optional[dict]:
        raise NotImplementedError

    def get_date(self, date_key: str) -> dict[str, dict]:
        """Day records of every course for one date key, by course."""

        raise NotImplementedError

    def get_range(self, start_key: str, end_key: str) -> dict[str, dict]:
        """Days within ``[start_key, end_key]`` by course then date key."""

        raise NotImplementedError


class RealtimeAttendanceRepository(AttendanceRepository):
    """Attendance tree stored at ``Attendance/{courseName}/{dateKey}``."""

    def __init__(self, store: RealtimeStore, *, root: str = ATTENDANCE_ROOT):
        self._store = store
        self._root = root

    def save_days(self, days: Sequence[CourseAttendanceDay]) -> None:
        updates = to_store_updates(list(days))
        if not updates:
            return
        self._store.update(self._root, updates)
        logger.info("Saved %d attendance day(s) (%d paths)", len(days), len(updates))

    def get_day(self, course_name: str, date_key: str) -> Optional[dict]:
        return _as_dict(self._store.get(f"{self._root}/{course_name}/{date_key}"))

    def get_course(self, course_name: str) -> Optional[dict]:
        return _as_dict(self._store.get(f"{self._root}/{course_name}"))

    def get_all(self) -> Optional[dict]:
        return _as_dict(self._store.get(self._root))

    def get_date(self, date_key: str) -> dict[str, dict]:
        found: dict[str, dict] = {}
        for course in self._store.keys(self._root):
            day = _as_dict(self._store.get(f"{self._root}/{course}/{date_key}"))
            if day:
                found[course] = day
        return found

    def get_range(self, start_key: str, end_key: str) -> dict[str, dict]:
        found: dict[str, dict] = {}
        for course in self._store.keys(self._root):
            days = self._store.range_by_key(f"{self._root}/{course}", start_key, end_key)
            if days:
                found[course] = days
        return found


def _as_dict(value: Any) -> Optional[dict]:
    return value if isinstance(value, dict) and value else None
