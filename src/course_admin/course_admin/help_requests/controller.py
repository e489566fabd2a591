from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/help-requests", methods=["GET"], endpoint="help_requests_list")
    @api_view("Failed to fetch help requests")
    def help_requests_list():
        response = jsonify(container.help_request_service.list_all())
        response.headers["Cache-Control"] = "no-cache"
        return response

    @app.route("/api/help-requests", methods=["POST"], endpoint="help_requests_create")
    @api_view("Failed to create help request")
    def help_requests_create():
        return jsonify(container.help_request_service.create(json_body())), 201

    @app.route("/api/help-requests/<request_id>", methods=["DELETE"], endpoint="help_requests_delete")
    @api_view("Failed to delete concern")
    def help_requests_delete(request_id: str):
        container.help_request_service.delete(request_id)
        return jsonify({"message": "Concern deleted successfully", "id": request_id})
