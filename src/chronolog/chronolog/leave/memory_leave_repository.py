from __future__ import annotations

import itertools
from datetime import date
from typing import Optional, Sequence

from ..core.enums import EventStatus
from .model import CalendarEvent, LeaveCategory
from .repository import CalendarEventRepository, LeaveCategoryRepository


class InMemoryCalendarEventRepository(CalendarEventRepository):
    def __init__(self):
        self._by_id: dict[str, CalendarEvent] = {}
        self._ids = itertools.count(1)

    def list_all(self, *, status: Optional[EventStatus] = None) -> Sequence[CalendarEvent]:
        return [e for e in self._by_id.values() if status is None or e.status == status]

    def list_for_employee(self, employee_id: str) -> Sequence[CalendarEvent]:
        return [e for e in self._by_id.values() if e.employee_id == employee_id]

    def get_by_id(self, event_id: str) -> Optional[CalendarEvent]:
        return self._by_id.get(event_id)

    def add(
        self,
        *,
        employee_id: str,
        category: str,
        start_date: date,
        end_date: date,
        status: EventStatus,
    ) -> CalendarEvent:
        event = CalendarEvent(
            event_id=f"event_{next(self._ids)}",
            employee_id=employee_id,
            category=category,
            start_date=start_date,
            end_date=end_date,
            status=status,
        )
        self._by_id[event.event_id] = event
        return event

    def update(self, event: CalendarEvent) -> bool:
        if event.event_id not in self._by_id:
            return False
        self._by_id[event.event_id] = event
        return True

    def remove(self, event_id: str) -> bool:
        return self._by_id.pop(event_id, None) is not None


class InMemoryLeaveCategoryRepository(LeaveCategoryRepository):
    def __init__(self, categories: Sequence[LeaveCategory] = ()):
        self._by_name: dict[str, LeaveCategory] = {c.name: c for c in categories}

    def list_all(self) -> Sequence[LeaveCategory]:
        return list(self._by_name.values())

    def get_by_name(self, name: str) -> Optional[LeaveCategory]:
        return self._by_name.get(name)

    def upsert(self, category: LeaveCategory) -> LeaveCategory:
        self._by_name[category.name] = category
        return category
