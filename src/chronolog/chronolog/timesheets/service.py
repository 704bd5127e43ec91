from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Sequence

from ..attendance.factory import PresenceStrategyFactory
from ..attendance.repository import AttendanceEventRepository
from ..common.datetime_utils import day_range_millis, from_millis, local_date
from ..core.constants import DEFAULT_LATE_ALERT_GRACE_MINUTES, DEFAULT_MAX_ACTIVITY_SECONDS
from ..core.enums import ActionKind, AttendanceStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..schedules.model import WorkSchedule
from ..schedules.repository import WorkScheduleRepository
from ..timeline.reconstructor import reconstruct
from .aggregator import aggregate, roll_up, summarize
from .model import DailyOverviewRow, LateArrival, RangeAggregate, TimesheetStats

logger = logging.getLogger(__name__)


class TimesheetService:
    """Timesheet reports built on top of the reconstructed intervals."""

    def __init__(
        self,
        events: AttendanceEventRepository,
        employees: EmployeeRepository,
        schedules: WorkScheduleRepository,
        *,
        tz: Optional[tzinfo] = None,
        strategy_factory: Optional[PresenceStrategyFactory] = None,
        late_alert_grace_minutes: int = DEFAULT_LATE_ALERT_GRACE_MINUTES,
        max_activity_seconds: int = DEFAULT_MAX_ACTIVITY_SECONDS,
    ):
        self._events = events
        self._employees = employees
        self._schedules = schedules
        self._tz = tz
        self._factory = strategy_factory or PresenceStrategyFactory()
        self._late_alert_grace_minutes = late_alert_grace_minutes
        self._max_activity_seconds = max_activity_seconds

    def _schedule_for(self, employee: Employee) -> Optional[WorkSchedule]:
        if not employee.work_schedule_id:
            return None
        return self._schedules.get_by_id(employee.work_schedule_id)

    def timesheet(self, start_date: date, end_date: date, *, now: int, search: str = "") -> Sequence[RangeAggregate]:
        """Per-employee totals for ``[start_date, end_date]``, sorted by employee name.

        Without a search term, employees with no events in the range are left out;
        with one, every matching employee is listed, even with zero time.
        """
        if end_date < start_date:
            raise ValidationError("End date must be on or after the start date")

        start, end = day_range_millis(start_date, end_date, self._tz)
        term = search.strip().lower()
        out: list[RangeAggregate] = []

        for employee in sorted(self._employees.list_all(), key=lambda e: e.name):
            if term and term not in employee.name.lower():
                continue
            events = self._events.list_between(start=start, end=end, employee_id=employee.employee_id)
            if not events and not term:
                continue

            intervals = reconstruct(events, now, state=employee.state)
            totals = roll_up(aggregate(intervals, self._tz)).get(employee.employee_id)
            out.append(totals or RangeAggregate(employee_id=employee.employee_id, days=(), work_ms=0, activity_ms=0))

        logger.debug("Timesheet %s..%s: %d employee(s)", start_date, end_date, len(out))
        return out

    def stats(self, start_date: date, end_date: date, *, now: int, search: str = "") -> TimesheetStats:
        return summarize(self.timesheet(start_date, end_date, now=now, search=search), start_date, end_date)

    def daily_overview(self, work_date: date, *, now: int) -> Sequence[DailyOverviewRow]:
        start, end = day_range_millis(work_date, work_date, self._tz)
        rows: list[DailyOverviewRow] = []

        for employee in sorted(self._employees.list_all(), key=lambda e: e.name):
            events = sorted(
                self._events.list_between(start=start, end=end, employee_id=employee.employee_id),
                key=lambda e: e.timestamp,
            )
            first_in = next((e.timestamp for e in events if e.action.kind == ActionKind.CLOCK_IN), None)
            last_out = next((e.timestamp for e in reversed(events) if e.action.is_clock_out), None)

            activity_ms = sum(
                i.duration_ms for i in reconstruct(events, now, state=employee.state) if not i.is_working
            )

            schedule = self._schedule_for(employee)
            arrival = AttendanceStatus.ABSENT
            departure = AttendanceStatus.ABSENT
            note = None
            if first_in is not None:
                clock_in = from_millis(first_in, self._tz)
                decision = self._factory.for_arrival(clock_in=clock_in, schedule=schedule).decide_arrival(
                    clock_in=clock_in, schedule=schedule
                )
                arrival, note = decision.status, decision.note

                clock_out = from_millis(last_out, self._tz) if last_out is not None else None
                departure = (
                    self._factory.for_departure(clock_out=clock_out, schedule=schedule, current=arrival)
                    .decide_departure(clock_out=clock_out, schedule=schedule, current=arrival)
                    .status
                )

            rows.append(
                DailyOverviewRow(
                    employee_id=employee.employee_id,
                    name=employee.name,
                    work_date=work_date,
                    first_clock_in=first_in,
                    last_clock_out=last_out,
                    activity_seconds=activity_ms / 1000,
                    arrival=arrival,
                    departure=departure,
                    is_excessive_activity=activity_ms / 1000 > self._max_activity_seconds,
                    note=note,
                )
            )
        return rows

    def late_arrivals(self, *, now: int) -> Sequence[LateArrival]:
        """Scheduled-today employees who have not clocked in past start + grace."""
        today = local_date(now, self._tz)
        start, end = day_range_millis(today, today, self._tz)
        clocked_in = {
            e.employee_id for e in self._events.list_between(start=start, end=end) if e.action.kind == ActionKind.CLOCK_IN
        }
        current = from_millis(now, self._tz)

        late: list[LateArrival] = []
        for employee in sorted(self._employees.list_all(), key=lambda e: e.name):
            if employee.employee_id in clocked_in:
                continue
            schedule = self._schedule_for(employee)
            if not schedule or not schedule.works_on(today):
                continue

            scheduled = datetime.combine(today, schedule.start_time, tzinfo=current.tzinfo)
            if current > scheduled + timedelta(minutes=self._late_alert_grace_minutes):
                minutes = int((current - scheduled).total_seconds() // 60)
                late.append(LateArrival(employee_id=employee.employee_id, name=employee.name, minutes_late=minutes))

        if late:
            logger.info("%d scheduled employee(s) have not clocked in yet", len(late))
        return late
