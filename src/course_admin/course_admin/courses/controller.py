from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/courses", methods=["POST"], endpoint="courses_create")
    @api_view("Failed to add course")
    def courses_create():
        return jsonify(container.course_service.create(json_body())), 201

    @app.route("/api/courses", methods=["GET"], endpoint="courses_list")
    @api_view("Failed to fetch courses")
    def courses_list():
        return jsonify(container.course_service.list_all())

    @app.route("/api/courses/<course_id>", methods=["GET"], endpoint="courses_detail")
    @api_view("Failed to fetch course details")
    def courses_detail(course_id: str):
        return jsonify(container.course_service.get(course_id))

    @app.route("/api/courses/<course_id>", methods=["PUT"], endpoint="courses_update")
    @api_view("Failed to update course")
    def courses_update(course_id: str):
        return jsonify(container.course_service.update(course_id, json_body()))

    @app.route("/api/courses/<course_id>", methods=["DELETE"], endpoint="courses_delete")
    @api_view("Failed to delete course")
    def courses_delete(course_id: str):
        container.course_service.delete(course_id)
        return jsonify({"message": "Course deleted successfully"})
