from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    registry = container.activity_registry

    @app.route("/api/activities", methods=["GET"], endpoint="list_activities")
    def list_activities():
        return jsonify([to_json(c) for c in registry.list_all()])

    @app.route("/api/activities", methods=["POST"], endpoint="add_activity")
    def add_activity():
        data = request.get_json(silent=True) or {}
        category = registry.add(data.get("name", ""), data.get("color", ""))
        return jsonify(to_json(category)), 201

    @app.route("/api/activities/<category_id>", methods=["DELETE"], endpoint="remove_activity")
    def remove_activity(category_id: str):
        registry.remove(category_id)
        return jsonify({"success": True})
