from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payments", methods=["POST"], endpoint="payments_save")
    @api_view("Failed to save payment data")
    def payments_save():
        data = container.payment_service.save(json_body())
        return jsonify({"success": True, "message": "Payment data saved successfully", "data": data})

    @app.route("/api/payments/<course_id>/<application_id>", methods=["PATCH"], endpoint="payments_update_fee")
    @api_view("Failed to update fee amount")
    def payments_update_fee(course_id: str, application_id: str):
        container.payment_service.update_fee(course_id, application_id, json_body().get("feeAmount"))
        return jsonify({"success": True, "message": "Fee amount updated successfully"})

    @app.route("/api/payments/<course_id>/<application_id>", methods=["GET"], endpoint="payments_detail")
    @api_view("Failed to fetch payment data")
    def payments_detail(course_id: str, application_id: str):
        return jsonify({"success": True, "data": container.payment_service.get(course_id, application_id)})
