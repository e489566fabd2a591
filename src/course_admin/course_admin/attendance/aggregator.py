"""In-memory shaping of attendance data.

Everything here is a pure transform: it never talks to the store. Ingestion turns a
request payload into per (course, date) day structures, and the query helpers decorate
day structures read from the store with presence statistics.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import canonical_date
from ..common.validators import require_key_segment, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceBatch, AttendanceRecord, AttendanceStats, CourseAttendanceDay, StudentEntry


def parse_batch(payload: Mapping[str, Any]) -> AttendanceBatch:
    date = payload.get("date")
    time = payload.get("time")
    attendance = payload.get("attendance")
    if not date or not time or attendance is None:
        raise ValidationError("date, time and attendance are required")
    if not isinstance(attendance, list):
        raise ValidationError("attendance must be a list")
    if not attendance:
        raise ValidationError("attendance must contain at least one record")

    parsed = canonical_date(date)
    records = tuple(_parse_record(item, index) for index, item in enumerate(attendance))
    return AttendanceBatch(
        date=parsed.isoformat(),
        date_key=parsed.strftime("%Y%m%d"),
        time=str(time),
        records=records,
    )


def _parse_record(item: Any, index: int) -> AttendanceRecord:
    if not isinstance(item, Mapping):
        raise ValidationError(f"attendance[{index}] must be an object")
    course_name = require_key_segment(item.get("courseName"), f"attendance[{index}].courseName")
    application_id = require_key_segment(item.get("applicationId"), f"attendance[{index}].applicationId")
    raw_status = require_non_empty(item.get("status"), f"attendance[{index}].status")
    try:
        status = AttendanceStatus(raw_status.lower())
    except ValueError:
        raise ValidationError(f"attendance[{index}].status must be 'present' or 'absent'") from None
    return AttendanceRecord(course_name=course_name, application_id=application_id, status=status)


def group_batch(batch: AttendanceBatch, *, recorded_at: datetime) -> list[CourseAttendanceDay]:
    """Group records by course then date key; later duplicates of a student win."""
    grouped: dict[tuple[str, str], CourseAttendanceDay] = {}
    for record in batch.records:
        key = (record.course_name, batch.date_key)
        day = grouped.get(key)
        if day is None:
            day = CourseAttendanceDay(
                course_name=record.course_name,
                date_key=batch.date_key,
                date=batch.date,
                time=batch.time,
            )
            grouped[key] = day
        day.students[record.application_id] = StudentEntry(status=record.status, recorded_at=recorded_at)
    return list(grouped.values())


def _status_of(entry: Any) -> Optional[str]:
    if isinstance(entry, StudentEntry):
        return entry.status.value
    if isinstance(entry, Mapping):
        return entry.get("status")
    return None


def compute_stats(entries: Mapping[str, Any]) -> AttendanceStats:
    """Presence counts over a mapping of id -> {status}.

    An empty mapping yields zero counts and "0.00%".
    """
    total = len(entries)
    present = sum(1 for entry in entries.values() if _status_of(entry) == AttendanceStatus.PRESENT.value)
    percentage = (present / total * 100) if total else 0.0
    return AttendanceStats(
        total_students=total,
        present=present,
        absent=total - present,
        attendance_percentage=f"{percentage:.2f}%",
    )


def summarize(day: CourseAttendanceDay) -> dict:
    return {"courseName": day.course_name, "date": day.date, **compute_stats(day.students).to_dict()}


def to_store_updates(days: list[CourseAttendanceDay]) -> dict[str, Any]:
    """Multi-path update (relative to the attendance root) covering every day.

    Each student is written at its own path so a resubmission only overwrites the
    students it names.
    """
    updates: dict[str, Any] = {}
    for day in days:
        base = f"{day.course_name}/{day.date_key}"
        updates[f"{base}/date"] = day.date
        updates[f"{base}/time"] = day.time
        for application_id, entry in day.students.items():
            updates[f"{base}/students/{application_id}"] = entry.to_store()
    return updates


def as_children(value: Any) -> dict:
    """Child nodes of a store value as a dict.

    The realtime database hands back a list for nodes keyed by small integers,
    with None in the gaps.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, list):
        return {str(index): child for index, child in enumerate(value) if child is not None}
    return {}


def with_stats(day: Mapping[str, Any]) -> dict:
    students = as_children(day.get("students"))
    return {**day, "students": students, "statistics": compute_stats(students).to_dict()}


def course_with_stats(days: Any) -> dict:
    days = as_children(days)
    return {date_key: with_stats(days[date_key]) for date_key in sorted(days) if isinstance(days[date_key], Mapping)}


def tree_with_stats(tree: Mapping[str, Any]) -> dict:
    shaped = {}
    tree = as_children(tree)
    for course in sorted(tree):
        days = as_children(tree[course])
        if days:
            shaped[course] = course_with_stats(days)
    return shaped


def student_days(
    tree: Mapping[str, Any],
    student_id: str,
    *,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> dict[str, dict[str, dict]]:
    """Every day a student has a status for, grouped by course.

    The optional bounds are compared against the stored human readable ``date``
    string, not the date key.
    """
    found: dict[str, dict[str, dict]] = {}
    tree = as_children(tree)
    for course in sorted(tree):
        days = as_children(tree[course])
        for date_key in sorted(days):
            day = days[date_key]
            if not isinstance(day, Mapping):
                continue
            entry = as_children(day.get("students")).get(student_id)
            if not isinstance(entry, Mapping):
                continue
            stored_date = str(day.get("date", ""))
            if start_date and stored_date < start_date:
                continue
            if end_date and stored_date > end_date:
                continue
            found.setdefault(course, {})[date_key] = {
                "date": day.get("date"),
                "time": day.get("time"),
                "status": entry.get("status"),
                "timestamp": entry.get("timestamp"),
            }
    return found
