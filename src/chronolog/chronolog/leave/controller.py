from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import local_date, now_millis
from ..common.serializers import to_json, with_extra
from ..common.validators import optional_date, require_date
from ..container import Container
from ..core.enums import EventStatus
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    def _event_json(event) -> dict:
        return with_extra(event, day_count=event.day_count)

    @app.route("/api/leave/categories", methods=["GET"], endpoint="leave_categories")
    def leave_categories():
        return jsonify([to_json(c) for c in container.leave_categories_repo.list_all()])

    @app.route("/api/leave/requests", methods=["POST"], endpoint="request_leave")
    def request_leave():
        data = request.get_json(silent=True) or {}
        # requested_by: id of the employee submitting, decides admin-only access
        requester = container.employee_service.get(str(data.get("requested_by") or data.get("employee_id") or ""))
        event = service.request_leave(
            current_role=requester.role,
            employee_id=str(data.get("employee_id") or requester.employee_id),
            category=data.get("category", ""),
            start_date=require_date(data.get("start_date"), "start_date"),
            end_date=require_date(data.get("end_date"), "end_date"),
        )
        return jsonify(_event_json(event)), 201

    @app.route("/api/leave/events", methods=["POST"], endpoint="add_leave_event")
    def add_leave_event():
        data = request.get_json(silent=True) or {}
        try:
            status = EventStatus(data.get("status") or EventStatus.APPROVED.value)
        except ValueError:
            raise ValidationError("status must be pending, approved or rejected") from None

        event = service.add_event(
            employee_id=str(data.get("employee_id", "")),
            category=data.get("category", ""),
            start_date=require_date(data.get("start_date"), "start_date"),
            end_date=require_date(data.get("end_date"), "end_date"),
            status=status,
        )
        return jsonify(_event_json(event)), 201

    @app.route("/api/leave/pending", methods=["GET"], endpoint="pending_leave")
    def pending_leave():
        return jsonify([_event_json(e) for e in service.list_pending()])

    @app.route("/api/leave/events/<event_id>/approve", methods=["POST"], endpoint="approve_leave")
    def approve_leave(event_id: str):
        return jsonify(_event_json(service.approve(event_id)))

    @app.route("/api/leave/events/<event_id>/reject", methods=["POST"], endpoint="reject_leave")
    def reject_leave(event_id: str):
        return jsonify(_event_json(service.reject(event_id)))

    @app.route("/api/leave/events/<event_id>", methods=["DELETE"], endpoint="remove_leave_event")
    def remove_leave_event(event_id: str):
        service.remove(event_id)
        return jsonify({"success": True})

    @app.route("/api/employees/<employee_id>/leave", methods=["GET"], endpoint="employee_leave")
    def employee_leave(employee_id: str):
        container.employee_service.get(employee_id)
        return jsonify([_event_json(e) for e in service.list_for_employee(employee_id)])

    @app.route("/api/employees/<employee_id>/leave-balance", methods=["GET"], endpoint="leave_balance")
    def leave_balance(employee_id: str):
        today = optional_date(request.args.get("today"), "today") or local_date(now_millis(), container.tz)
        balance = service.balance(employee_id, today=today)
        if not balance.is_configured:
            return jsonify(with_extra(balance, is_configured=False))
        return jsonify(with_extra(balance, is_configured=True, pending_days=balance.pending_days))
