"""Example: use the service layer without Flask.

Prints one student's attendance, per course, for January 2024.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.course_admin.course_admin.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(firebase_config=settings.FIREBASE_CONFIG)
    report = container.attendance_service.student_report("APP001", start_date="2024-01-01", end_date="2024-01-31")
    for course, stats in report.statistics.items():
        print(course, stats)


if __name__ == "__main__":
    main()
