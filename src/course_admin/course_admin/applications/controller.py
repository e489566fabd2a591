from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/applications", methods=["POST"], endpoint="applications_submit")
    @api_view("Internal server error")
    def applications_submit():
        application_id = container.application_service.submit(json_body())
        return jsonify({
            "success": True,
            "message": "Application submitted successfully",
            "data": {"applicationId": application_id},
        }), 201

    @app.route("/api/applications", methods=["GET"], endpoint="applications_list")
    @api_view("Internal server error")
    def applications_list():
        return jsonify({"success": True, "data": container.application_service.list_all()})

    @app.route("/api/applications/<application_id>", methods=["GET"], endpoint="applications_detail")
    @api_view("Internal server error")
    def applications_detail(application_id: str):
        return jsonify({"success": True, "data": container.application_service.get(application_id)})

    @app.route("/api/applications/<application_id>/status", methods=["PUT"], endpoint="applications_status")
    @api_view("Internal server error")
    def applications_status(application_id: str):
        container.application_service.set_status(application_id, json_body().get("status"))
        return jsonify({"success": True, "message": "Application status updated successfully"})
