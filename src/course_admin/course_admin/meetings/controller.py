from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/courses/meet", methods=["POST"], endpoint="meet_links_save")
    @api_view("Failed to save meet link")
    def meet_links_save():
        data = container.meet_link_service.save(json_body())
        return jsonify({
            "message": "Google Meet link and course details saved successfully",
            "data": data,
        })

    @app.route("/api/meetlinks/all", methods=["GET"], endpoint="meet_links_list")
    @api_view("Failed to fetch meet links")
    def meet_links_list():
        links = container.meet_link_service.list_all()
        if not links:
            return jsonify({"status": False, "message": "No meet links available", "data": []})
        return jsonify({"status": True, "message": "Meet links retrieved successfully", "data": links})
