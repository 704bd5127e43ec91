from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import to_json
from ..common.validators import optional_date
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError


def _employee_json(employee) -> dict:
    out = to_json(employee)
    out["is_clocked_out"] = employee.is_clocked_out
    return out


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify([_employee_json(e) for e in container.employee_service.list_all()])

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        return jsonify(_employee_json(container.employee_service.get(employee_id)))

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = request.get_json(silent=True) or {}
        try:
            role = Role(data.get("role") or Role.EMPLOYEE.value)
        except ValueError:
            raise ValidationError("role must be 'admin' or 'employee'") from None

        employee = container.employee_service.add(
            name=data.get("name", ""),
            email=data.get("email", ""),
            location=data.get("location", ""),
            role=role,
            work_schedule_id=data.get("work_schedule_id"),
            hire_date=optional_date(data.get("hire_date"), "hire_date"),
        )
        return jsonify(_employee_json(employee)), 201

    @app.route("/api/employees/<employee_id>/leave-settings", methods=["PUT"], endpoint="update_leave_settings")
    def update_leave_settings(employee_id: str):
        data = request.get_json(silent=True) or {}
        try:
            adjustment = float(data.get("manual_leave_adjustment") or 0)
        except (TypeError, ValueError):
            raise ValidationError("manual_leave_adjustment must be a number") from None

        employee = container.employee_service.update_leave_settings(
            employee_id,
            hire_date=optional_date(data.get("hire_date"), "hire_date"),
            termination_date=optional_date(data.get("termination_date"), "termination_date"),
            manual_leave_adjustment=adjustment,
        )
        return jsonify(_employee_json(employee))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="remove_employee")
    def remove_employee(employee_id: str):
        container.employee_service.remove(employee_id)
        return jsonify({"success": True})
