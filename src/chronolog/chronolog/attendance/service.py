from __future__ import annotations

import logging
from dataclasses import replace
from datetime import tzinfo
from typing import Optional, Sequence

from ..common.datetime_utils import local_date, now_millis
from ..core.enums import ActionKind
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .corrections import detect_correction_conflicts
from .model import Action, AttendanceEvent
from .repository import AttendanceEventRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Records status changes and applies administrative corrections to the log."""

    def __init__(
        self,
        events: AttendanceEventRepository,
        employees: EmployeeRepository,
        *,
        tz: Optional[tzinfo] = None,
    ):
        self._events = events
        self._employees = employees
        self._tz = tz

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def _get_event(self, event_id: str) -> AttendanceEvent:
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError(f"Log entry {event_id} not found")
        return event

    def list_events(self, employee_id: str) -> Sequence[AttendanceEvent]:
        return sorted(self._events.list_for_employee(employee_id), key=lambda e: e.timestamp)

    def record_action(self, employee_id: str, action: Action, *, now: Optional[int] = None) -> AttendanceEvent:
        now = now if now is not None else now_millis()
        employee = self._get_employee(employee_id)

        updated = replace(employee, status=action.resulting_status, current_status_start_time=now)
        if action.kind == ActionKind.CLOCK_IN:
            updated = replace(updated, last_clock_in_time=now)
        elif action.kind == ActionKind.CLOCK_OUT:
            updated = replace(updated, last_clock_in_time=None, current_status_start_time=None)

        self._employees.update(updated)
        event = self._events.add(employee_id=employee_id, action=action, timestamp=now)
        logger.info("Employee %s: %s -> %s", employee_id, action, updated.status)
        return event

    def update_current_session_start(
        self,
        employee_id: str,
        new_start: int,
        *,
        now: Optional[int] = None,
    ) -> tuple[Employee, AttendanceEvent]:
        """Move the start of the employee's live status, and the log entry that opened it."""
        now = now if now is not None else now_millis()
        employee = self._get_employee(employee_id)
        original = employee.current_status_start_time
        if not original:
            raise ValidationError("Employee has no active session")
        if new_start > now:
            raise ValidationError("Cannot set a time in the future")

        log = next((e for e in self._events.list_for_employee(employee_id) if e.timestamp == original), None)
        if not log:
            raise NotFoundError("Log entry for current session not found")

        updated_log = log.corrected(timestamp=new_start)
        self._ensure_no_conflicts(updated_log.employee_id, [log], {log.event_id: updated_log})

        updated_employee = replace(employee, current_status_start_time=new_start)
        if employee.last_clock_in_time == original:
            updated_employee = replace(updated_employee, last_clock_in_time=new_start)

        self._employees.update(updated_employee)
        self._events.update(updated_log)
        return updated_employee, updated_log

    def correct_event(
        self,
        event_id: str,
        *,
        action: Optional[Action] = None,
        timestamp: Optional[int] = None,
        now: Optional[int] = None,
    ) -> AttendanceEvent:
        now = now if now is not None else now_millis()
        event = self._get_event(event_id)
        if timestamp is not None and timestamp > now:
            raise ValidationError("Cannot set a time in the future")

        corrected = event.corrected(action=action, timestamp=timestamp)
        if corrected == event:
            return event

        self._ensure_no_conflicts(event.employee_id, [event], {event.event_id: corrected})
        self._events.update(corrected)
        logger.info("Corrected log entry %s: %s@%s -> %s@%s", event_id, event.action, event.timestamp, corrected.action, corrected.timestamp)
        return corrected

    def update_timesheet_entry(
        self,
        start_event_id: str,
        end_event_id: str,
        new_start: int,
        new_end: int,
    ) -> list[AttendanceEvent]:
        """Move both log entries that bound one timesheet row."""
        if new_end <= new_start:
            raise ValidationError("End time must be after start time")

        start_log = self._get_event(start_event_id)
        end_log = self._get_event(end_event_id)
        if start_log.employee_id != end_log.employee_id:
            raise ValidationError("Log entries belong to different employees")

        corrections = {
            start_log.event_id: start_log.corrected(timestamp=new_start),
            end_log.event_id: end_log.corrected(timestamp=new_end),
        }
        self._ensure_no_conflicts(start_log.employee_id, [start_log, end_log], corrections)

        for updated in corrections.values():
            self._events.update(updated)
        return list(corrections.values())

    def _ensure_no_conflicts(
        self,
        employee_id: str,
        originals: Sequence[AttendanceEvent],
        corrections: dict[str, AttendanceEvent],
    ) -> None:
        days = {local_date(e.timestamp, self._tz) for e in originals}
        days |= {local_date(e.timestamp, self._tz) for e in corrections.values()}

        day_events = sorted(
            (e for e in self._events.list_for_employee(employee_id) if local_date(e.timestamp, self._tz) in days),
            key=lambda e: e.timestamp,
        )
        problems = detect_correction_conflicts(day_events, corrections, tz=self._tz)
        if problems:
            logger.warning("Rejected correction for employee %s: %s", employee_id, "; ".join(problems))
            raise ConflictError("; ".join(problems))
