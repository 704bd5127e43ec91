from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import local_date, now_millis
from ..common.serializers import to_json, with_extra
from ..common.validators import require_date
from ..container import Container
from ..core.constants import DEFAULT_REPORT_DAYS


def register(app: Flask, container: Container) -> None:
    service = container.timesheet_service

    def _period(now: int):
        today = local_date(now, container.tz)
        end = require_date(request.args["end"], "end") if request.args.get("end") else today
        start = (
            require_date(request.args["start"], "start")
            if request.args.get("start")
            else end - timedelta(days=DEFAULT_REPORT_DAYS - 1)
        )
        return start, end

    @app.route("/api/timesheets", methods=["GET"], endpoint="timesheets")
    def timesheets():
        now = now_millis()
        start, end = _period(now)
        ranges = service.timesheet(start, end, now=now, search=request.args.get("search", ""))
        names = {e.employee_id: e.name for e in container.employee_service.list_all()}

        return jsonify(
            {
                "start": start.isoformat(),
                "end": end.isoformat(),
                "employees": [
                    {
                        "employee_id": r.employee_id,
                        "name": names.get(r.employee_id, ""),
                        "work_seconds": r.work_seconds,
                        "activity_seconds": r.activity_seconds,
                        "days": [
                            {
                                "work_date": d.work_date.isoformat(),
                                "work_seconds": d.work_seconds,
                                "activity_seconds": d.activity_seconds,
                                "entries": [with_extra(x, duration_seconds=x.duration_seconds) for x in d.entries],
                            }
                            for d in r.days
                        ],
                    }
                    for r in ranges
                ],
            }
        )

    @app.route("/api/timesheets/stats", methods=["GET"], endpoint="timesheet_stats")
    def timesheet_stats():
        now = now_millis()
        start, end = _period(now)
        return jsonify(to_json(service.stats(start, end, now=now, search=request.args.get("search", ""))))

    @app.route("/api/timesheets/overview", methods=["GET"], endpoint="daily_overview")
    def daily_overview():
        now = now_millis()
        work_date = require_date(request.args["date"], "date") if request.args.get("date") else local_date(now, container.tz)
        rows = service.daily_overview(work_date, now=now)
        return jsonify(
            [
                with_extra(r, presence=r.presence, is_late=r.is_late, is_early_leave=r.is_early_leave)
                for r in rows
            ]
        )

    @app.route("/api/late-arrivals", methods=["GET"], endpoint="late_arrivals")
    def late_arrivals():
        return jsonify([to_json(x) for x in service.late_arrivals(now=now_millis())])
