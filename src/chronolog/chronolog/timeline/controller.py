from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import local_date, now_millis
from ..common.serializers import to_json, with_extra
from ..common.validators import require_date
from ..container import Container
from ..core.enums import TimelineView
from ..core.exceptions import ValidationError
from .windows import shift_selection


def register(app: Flask, container: Container) -> None:
    service = container.timeline_service

    @app.route("/api/timeline", methods=["GET"], endpoint="timeline")
    def timeline():
        now = now_millis()
        try:
            view = TimelineView(request.args.get("view", TimelineView.DAY.value))
        except ValueError:
            raise ValidationError("view must be one of day, week, month") from None

        selected: date = (
            require_date(request.args["date"], "date") if request.args.get("date") else local_date(now, container.tz)
        )
        steps = request.args.get("shift", type=int)
        if steps:
            selected = shift_selection(view, selected, steps)

        employee_ids = request.args.getlist("employee") or None
        result = service.timeline(view, selected, now=now, employee_ids=employee_ids)

        return jsonify(
            {
                "view": view.value,
                "date": selected.isoformat(),
                "window": to_json(result.window),
                "colors": result.colors,
                "rows": [
                    {
                        "employee_id": row.employee_id,
                        "name": row.name,
                        "lane_count": row.lane_count,
                        "segments": [
                            with_extra(s.interval, lane=s.lane, color=result.colors.get(s.activity_label))
                            for s in row.segments
                        ],
                    }
                    for row in result.rows
                ],
            }
        )

    @app.route("/api/employees/<employee_id>/time-entries", methods=["GET"], endpoint="time_entries")
    def time_entries(employee_id: str):
        entries = service.time_entries(employee_id, now=now_millis())
        return jsonify([with_extra(i, duration_seconds=i.duration_seconds) for i in entries])
