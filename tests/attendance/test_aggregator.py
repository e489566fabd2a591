from __future__ import annotations

from datetime import datetime

import pytest

from src.course_admin.course_admin.attendance.aggregator import (
    compute_stats,
    group_batch,
    parse_batch,
    student_days,
    to_store_updates,
)
from src.course_admin.course_admin.common.datetime_utils import to_date_key
from src.course_admin.course_admin.core.enums import AttendanceStatus
from src.course_admin.course_admin.core.exceptions import ValidationError


def test_date_key_strips_delimiters():
    assert to_date_key("2024-01-20") == "20240120"


def test_date_key_preserves_chronological_order():
    dates = ["2023-12-31", "2024-01-02", "2024-01-20", "2024-02-01", "2024-10-05"]
    keys = [to_date_key(d) for d in dates]

    assert sorted(keys) == keys
    assert len(set(keys)) == len(dates)


@pytest.mark.parametrize("value", ["2024-13-01", "20/01/2024", "", "2024-02-30", "2024-1-5", "24-01-05"])
def test_date_key_rejects_invalid_dates(value):
    with pytest.raises(ValidationError):
        to_date_key(value)


def test_compute_stats_two_of_three_present():
    stats = compute_stats({"a": {"status": "present"}, "b": {"status": "present"}, "c": {"status": "absent"}})

    assert stats.to_dict() == {
        "totalStudents": 3,
        "present": 2,
        "absent": 1,
        "attendancePercentage": "66.67%",
    }


def test_compute_stats_empty_group_is_zero_percent():
    assert compute_stats({}).to_dict() == {
        "totalStudents": 0,
        "present": 0,
        "absent": 0,
        "attendancePercentage": "0.00%",
    }


def test_compute_stats_all_present():
    assert compute_stats({"a": {"status": "present"}}).attendance_percentage == "100.00%"


@pytest.mark.parametrize(
    "payload",
    [
        {"time": "10:00", "attendance": []},
        {"date": "2024-01-20", "attendance": []},
        {"date": "2024-01-20", "time": "10:00"},
        {"date": "2024-01-20", "time": "10:00", "attendance": "S1"},
        {"date": "2024-01-20", "time": "10:00", "attendance": []},
        {"date": "2024-01-20", "time": "10:00", "attendance": [{"courseName": "Python", "applicationId": "S1", "status": "late"}]},
        {"date": "2024-01-20", "time": "10:00", "attendance": [{"courseName": "Py/thon", "applicationId": "S1", "status": "present"}]},
        {"date": "2024-01-20", "time": "10:00", "attendance": ["S1"]},
    ],
)
def test_parse_batch_rejects_malformed_payloads(payload):
    with pytest.raises(ValidationError):
        parse_batch(payload)


def test_group_batch_groups_by_course_and_last_duplicate_wins():
    batch = parse_batch({
        "date": "2024-01-20",
        "time": "10:00 AM",
        "attendance": [
            {"courseName": "Python", "applicationId": "S1", "status": "present"},
            {"courseName": "Java", "applicationId": "S2", "status": "absent"},
            {"courseName": "Python", "applicationId": "S3", "status": "absent"},
            {"courseName": "Python", "applicationId": "S1", "status": "absent"},
        ],
    })
    recorded_at = datetime(2024, 1, 20, 10, 5)

    days = group_batch(batch, recorded_at=recorded_at)

    assert [(d.course_name, d.date_key) for d in days] == [("Python", "20240120"), ("Java", "20240120")]
    python = days[0]
    assert set(python.students) == {"S1", "S3"}
    assert python.students["S1"].status == AttendanceStatus.ABSENT
    assert {e.recorded_at for e in python.students.values()} == {recorded_at}


def test_store_updates_write_each_student_at_its_own_path():
    batch = parse_batch({
        "date": "2024-01-20",
        "time": "10:00",
        "attendance": [{"courseName": "Python", "applicationId": "S1", "status": "present"}],
    })

    updates = to_store_updates(group_batch(batch, recorded_at=datetime(2024, 1, 20, 10, 0)))

    assert updates == {
        "Python/20240120/date": "2024-01-20",
        "Python/20240120/time": "10:00",
        "Python/20240120/students/S1": {"status": "present", "timestamp": "2024-01-20T10:00:00"},
    }


def test_student_days_filters_on_stored_date_string():
    tree = {
        "Python": {
            "20240110": {"date": "2024-01-10", "time": "9", "students": {"S1": {"status": "present"}}},
            "20240205": {"date": "2024-02-05", "time": "9", "students": {"S1": {"status": "absent"}}},
        }
    }

    found = student_days(tree, "S1", start_date="2024-01-01", end_date="2024-01-31")

    assert list(found["Python"]) == ["20240110"]
    assert found["Python"]["20240110"]["status"] == "present"
