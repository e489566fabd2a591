from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    @api_view("Server error")
    def admin_login():
        body = json_body()
        container.admin_auth_service.authenticate(body.get("userId"), body.get("password"))
        return jsonify({"success": True, "message": "Login successful"})
