from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Per-student status recorded for one course session."""

    PRESENT = "present"
    ABSENT = "absent"


class ApplicationStatus(str, Enum):
    """Admission decision stored on an application."""

    SELECTED = "SELECTED"
    REJECTED = "REJECTED"
    PENDING = "PENDING"


class HelpRequestStatus(str, Enum):
    PENDING = "pending"
