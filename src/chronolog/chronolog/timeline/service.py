from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import Iterable, Optional, Sequence

from ..activities.registry import ActivityRegistry
from ..attendance.repository import AttendanceEventRepository
from ..core.enums import TimelineView
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .lanes import lane_count, pack_lanes
from .model import EmployeeTimeline, Interval, Timeline
from .reconstructor import reconstruct
from .windows import window_for

logger = logging.getLogger(__name__)


class TimelineService:
    def __init__(
        self,
        events: AttendanceEventRepository,
        employees: EmployeeRepository,
        registry: ActivityRegistry,
        *,
        tz: Optional[tzinfo] = None,
    ):
        self._events = events
        self._employees = employees
        self._registry = registry
        self._tz = tz

    def timeline(
        self,
        view: TimelineView,
        selected_date: date,
        *,
        now: int,
        employee_ids: Optional[Iterable[str]] = None,
    ) -> Timeline:
        """Day/week/month timeline; every employee gets a row even when empty."""
        window = window_for(view, selected_date, self._tz)
        wanted = set(employee_ids) if employee_ids is not None else None

        rows: list[EmployeeTimeline] = []
        colors: dict[str, str] = {}
        for employee in sorted(self._employees.list_all(), key=lambda e: e.name):
            if wanted is not None and employee.employee_id not in wanted:
                continue
            intervals = reconstruct(
                self._events.list_for_employee(employee.employee_id),
                now,
                state=employee.state,
                window=window,
            )
            segments = pack_lanes(intervals)
            for segment in segments:
                colors.setdefault(segment.activity_label, self._registry.color_for(segment.activity_label))
            rows.append(
                EmployeeTimeline(
                    employee_id=employee.employee_id,
                    name=employee.name,
                    segments=tuple(segments),
                    lane_count=lane_count(segments),
                )
            )

        logger.debug("Timeline %s %s: %d row(s)", view.value, selected_date, len(rows))
        return Timeline(window=window, rows=tuple(rows), colors=colors)

    def time_entries(self, employee_id: str, *, now: int) -> Sequence[Interval]:
        """Closed intervals of one employee, most recent first."""
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        intervals = reconstruct(self._events.list_for_employee(employee_id), now, state=employee.state)
        closed = [i for i in intervals if not i.is_ongoing]
        return sorted(closed, key=lambda i: i.start_time, reverse=True)
