"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the logic lives in the services.
"""

import importlib
from datetime import date, datetime

from config import get_settings_module

from src.chronolog.chronolog.attendance.model import parse_action
from src.chronolog.chronolog.common.datetime_utils import to_millis
from src.chronolog.chronolog.container import build_container
from src.chronolog.chronolog.core.enums import TimelineView


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)
    day = date(2025, 1, 6)

    def at(hour: int, minute: int = 0) -> int:
        return to_millis(datetime(day.year, day.month, day.day, hour, minute, tzinfo=container.tz))

    for when, action in [(at(8), "Clock In"), (at(10), "Start Break"), (at(10, 15), "End Break"), (at(16), "Clock Out")]:
        container.attendance_service.record_action("2", parse_action(action), now=when)

    now = at(18)
    for row in container.timesheet_service.timesheet(day, day, now=now):
        print(row.employee_id, "work:", row.work_seconds, "s activity:", row.activity_seconds, "s")

    timeline = container.timeline_service.timeline(TimelineView.DAY, day, now=now)
    for line in timeline.rows:
        print(line.name, [(s.activity_label, s.lane) for s in line.segments])


if __name__ == "__main__":
    main()
