from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.http import api_view, json_body
from ..container import Container
from .model import AttendanceQuery


def register(app: Flask, container: Container) -> None:
    def _metadata(query: dict, **extra) -> dict:
        return {"timestamp": now_local().isoformat(), "query": query, **extra}

    def _arg(name: str):
        value = request.args.get(name)
        return value.strip() if value and value.strip() else None

    @app.route("/attendance", methods=["POST"], endpoint="attendance_submit")
    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_submit")
    @api_view("Failed to record attendance")
    def attendance_submit():
        summary = container.attendance_service.record_batch(json_body())
        return jsonify({
            "success": True,
            "message": "Attendance recorded successfully",
            "summary": summary,
        })

    @app.route("/attendance", methods=["GET"], endpoint="attendance_query")
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_query")
    @api_view("Failed to fetch attendance")
    def attendance_query():
        query = AttendanceQuery(
            date=_arg("date"),
            course=_arg("course"),
            start_date=_arg("startDate"),
            end_date=_arg("endDate"),
        )
        data = container.attendance_service.query(query)
        return jsonify({"success": True, "data": data, "metadata": _metadata(query.to_dict())})

    @app.route("/attendance/student/<student_id>", methods=["GET"], endpoint="attendance_student")
    @app.route("/api/attendance/student/<student_id>", methods=["GET"], endpoint="attendance_student")
    @api_view("Failed to fetch student attendance")
    def attendance_student(student_id: str):
        start_date = _arg("startDate")
        end_date = _arg("endDate")
        report = container.attendance_service.student_report(student_id, start_date=start_date, end_date=end_date)
        query = {k: v for k, v in {"startDate": start_date, "endDate": end_date}.items() if v}
        return jsonify({
            "success": True,
            "studentId": report.student_id,
            "data": report.data,
            "statistics": report.statistics,
            "metadata": _metadata(query, totalCourses=len(report.data)),
        })
