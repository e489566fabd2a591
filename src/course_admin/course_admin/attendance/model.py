from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's status inside a submitted batch."""

    course_name: str
    application_id: str
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceBatch:
    date: str
    date_key: str
    time: str
    records: tuple[AttendanceRecord, ...]


@dataclass(frozen=True)
class StudentEntry:
    status: AttendanceStatus
    recorded_at: datetime

    def to_store(self) -> dict:
        return {"status": self.status.value, "timestamp": self.recorded_at.isoformat()}


@dataclass
class CourseAttendanceDay:
    """All statuses of one course on one date, keyed by application id."""

    course_name: str
    date_key: str
    date: str
    time: str
    students: dict[str, StudentEntry] = field(default_factory=dict)


@dataclass(frozen=True)
class AttendanceStats:
    total_students: int
    present: int
    absent: int
    attendance_percentage: str

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "present": self.present,
            "absent": self.absent,
            "attendancePercentage": self.attendance_percentage,
        }


@dataclass(frozen=True)
class AttendanceQuery:
    date: Optional[str] = None
    course: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    def to_dict(self) -> dict:
        echo = {
            "date": self.date,
            "course": self.course,
            "startDate": self.start_date,
            "endDate": self.end_date,
        }
        return {k: v for k, v in echo.items() if v is not None}


@dataclass(frozen=True)
class StudentReport:
    student_id: str
    data: dict[str, dict[str, dict]]
    statistics: dict[str, dict]
