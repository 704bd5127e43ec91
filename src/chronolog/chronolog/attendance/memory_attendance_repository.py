from __future__ import annotations

import itertools
from typing import Optional, Sequence

from .model import Action, AttendanceEvent
from .repository import AttendanceEventRepository


class InMemoryAttendanceEventRepository(AttendanceEventRepository):
    """Append-only log kept in insertion order; ids are monotonic."""

    def __init__(self):
        self._events: list[AttendanceEvent] = []
        self._ids = itertools.count(1)

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceEvent]:
        return [e for e in self._events if e.employee_id == employee_id]

    def list_between(self, *, start: int, end: int, employee_id: Optional[str] = None) -> Sequence[AttendanceEvent]:
        return [
            e
            for e in self._events
            if start <= e.timestamp < end and (employee_id is None or e.employee_id == employee_id)
        ]

    def list_all(self) -> Sequence[AttendanceEvent]:
        return list(self._events)

    def get_by_id(self, event_id: str) -> Optional[AttendanceEvent]:
        for e in self._events:
            if e.event_id == event_id:
                return e
        return None

    def add(self, *, employee_id: str, action: Action, timestamp: int) -> AttendanceEvent:
        event = AttendanceEvent(
            event_id=f"log_{next(self._ids)}",
            employee_id=employee_id,
            action=action,
            timestamp=int(timestamp),
        )
        self._events.append(event)
        return event

    def update(self, event: AttendanceEvent) -> bool:
        for i, e in enumerate(self._events):
            if e.event_id == event.event_id:
                self._events[i] = event
                return True
        return False
