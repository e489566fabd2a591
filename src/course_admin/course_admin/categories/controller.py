from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/categories", methods=["POST"], endpoint="categories_create")
    @api_view("Failed to create category")
    def categories_create():
        category = container.category_service.create(json_body().get("name"))
        return jsonify({"id": category.category_id, "name": category.name}), 201

    @app.route("/api/categories", methods=["GET"], endpoint="categories_list")
    @api_view("Failed to fetch categories")
    def categories_list():
        return jsonify([c.to_dict() for c in container.category_service.list_all()])

    @app.route("/api/categories/<category_id>", methods=["PUT"], endpoint="categories_update")
    @api_view("Failed to update category")
    def categories_update(category_id: str):
        category = container.category_service.rename(category_id, json_body().get("name"))
        return jsonify({"id": category.category_id, "name": category.name})

    @app.route("/api/categories/<category_id>", methods=["DELETE"], endpoint="categories_delete")
    @api_view("Failed to delete category")
    def categories_delete(category_id: str):
        container.category_service.delete(category_id)
        return jsonify({"message": "Category deleted successfully"})
