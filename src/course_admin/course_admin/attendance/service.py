from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import now_local, to_date_key
from ..common.validators import require_key_segment
from ..core.exceptions import NotFoundError, ValidationError
from . import aggregator
from .model import AttendanceQuery, StudentReport
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record_batch(self, payload: Mapping[str, Any], *, now: datetime | None = None) -> list[dict]:
        """Store a submitted batch and return one summary per (course, date) group."""
        batch = aggregator.parse_batch(payload)
        days = aggregator.group_batch(batch, recorded_at=now or now_local())
        self._attendance.save_days(days)
        logger.info("Recorded attendance for %s across %d course(s)", batch.date, len(days))
        return [aggregator.summarize(day) for day in days]

    def query(self, query: AttendanceQuery) -> dict:
        if bool(query.start_date) != bool(query.end_date):
            raise ValidationError("startDate and endDate must be provided together")

        if query.course:
            course = require_key_segment(query.course, "course")
            if query.date:
                day = self._attendance.get_day(course, to_date_key(query.date))
                if not day:
                    raise NotFoundError(f"No attendance found for {course} on {query.date}")
                return aggregator.with_stats(day)

            days = self._attendance.get_course(course)
            if not days:
                raise NotFoundError(f"No attendance found for {course}")
            return aggregator.course_with_stats(days)

        if query.start_date:
            start_key = to_date_key(query.start_date)
            end_key = to_date_key(query.end_date)
            if start_key > end_key:
                raise ValidationError("startDate must not be after endDate")
            shaped = aggregator.tree_with_stats(self._attendance.get_range(start_key, end_key))
            if not shaped:
                raise NotFoundError(f"No attendance found between {query.start_date} and {query.end_date}")
            return shaped

        if query.date:
            by_course = self._attendance.get_date(to_date_key(query.date))
            if not by_course:
                raise NotFoundError(f"No attendance found on {query.date}")
            return {course: aggregator.with_stats(by_course[course]) for course in sorted(by_course)}

        tree = self._attendance.get_all()
        if not tree:
            raise NotFoundError("No attendance records found")
        return aggregator.tree_with_stats(tree)

    def student_report(
        self,
        student_id: str,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> StudentReport:
        student_id = require_key_segment(student_id, "studentId")
        tree = self._attendance.get_all() or {}
        data = aggregator.student_days(tree, student_id, start_date=start_date, end_date=end_date)
        if not data:
            raise NotFoundError(f"No attendance records found for student {student_id}")

        statistics = {course: aggregator.compute_stats(days).to_dict() for course, days in data.items()}
        return StudentReport(student_id=student_id, data=data, statistics=statistics)
