from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_millis
from ..common.serializers import to_json
from ..common.validators import require_millis
from ..container import Container
from .model import parse_action


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/employees/<employee_id>/actions", methods=["POST"], endpoint="record_action")
    def record_action(employee_id: str):
        data = request.get_json(silent=True) or {}
        action = parse_action(data.get("action", ""))
        event = service.record_action(employee_id, action, now=now_millis())
        return jsonify(to_json(event)), 201

    @app.route("/api/employees/<employee_id>/events", methods=["GET"], endpoint="list_events")
    def list_events(employee_id: str):
        container.employee_service.get(employee_id)
        return jsonify([to_json(e) for e in service.list_events(employee_id)])

    @app.route("/api/employees/<employee_id>/session", methods=["PUT"], endpoint="update_session_start")
    def update_session_start(employee_id: str):
        data = request.get_json(silent=True) or {}
        employee, event = service.update_current_session_start(
            employee_id, require_millis(data.get("start"), "start"), now=now_millis()
        )
        return jsonify({"employee": to_json(employee), "event": to_json(event)})

    @app.route("/api/events/<event_id>", methods=["PATCH"], endpoint="correct_event")
    def correct_event(event_id: str):
        data = request.get_json(silent=True) or {}
        action = parse_action(data["action"]) if data.get("action") else None
        timestamp = require_millis(data["timestamp"], "timestamp") if data.get("timestamp") is not None else None
        event = service.correct_event(event_id, action=action, timestamp=timestamp, now=now_millis())
        return jsonify(to_json(event))

    @app.route("/api/timesheet-entries", methods=["PUT"], endpoint="update_timesheet_entry")
    def update_timesheet_entry():
        data = request.get_json(silent=True) or {}
        events = service.update_timesheet_entry(
            str(data.get("start_event_id", "")),
            str(data.get("end_event_id", "")),
            require_millis(data.get("start"), "start"),
            require_millis(data.get("end"), "end"),
        )
        return jsonify([to_json(e) for e in events])
