from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications", methods=["GET"], endpoint="notifications_list")
    @api_view("Failed to fetch notifications")
    def notifications_list():
        return jsonify(container.notification_service.list_all())

    @app.route("/api/notifications", methods=["POST"], endpoint="notifications_create")
    @api_view("Failed to create notification")
    def notifications_create():
        return jsonify(container.notification_service.create(json_body().get("message"))), 201

    @app.route("/api/notifications/<notification_id>", methods=["PUT"], endpoint="notifications_update")
    @api_view("Failed to update notification")
    def notifications_update(notification_id: str):
        container.notification_service.update(notification_id, json_body().get("message"))
        return jsonify({"message": "Notification updated successfully"})

    @app.route("/api/notifications/<notification_id>", methods=["DELETE"], endpoint="notifications_delete")
    @api_view("Failed to delete notification")
    def notifications_delete(notification_id: str):
        container.notification_service.delete(notification_id)
        return jsonify({"message": "Notification deleted successfully"})
