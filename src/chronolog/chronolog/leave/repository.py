from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import EventStatus
from .model import CalendarEvent, LeaveCategory


class CalendarEventRepository(Protocol):
    def list_all(self, *, status: Optional[EventStatus] = None) -> Sequence[CalendarEvent]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[CalendarEvent]:
        raise NotImplementedError

    def get_by_id(self, event_id: str) -> Optional[CalendarEvent]:
        raise NotImplementedError

    def add(
        self,
        *,
        employee_id: str,
        category: str,
        start_date: date,
        end_date: date,
        status: EventStatus,
    ) -> CalendarEvent:
        raise NotImplementedError

    def update(self, event: CalendarEvent) -> bool:
        raise NotImplementedError

    def remove(self, event_id: str) -> bool:
        raise NotImplementedError


class LeaveCategoryRepository(Protocol):
    def list_all(self) -> Sequence[LeaveCategory]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[LeaveCategory]:
        raise NotImplementedError

    def upsert(self, category: LeaveCategory) -> LeaveCategory:
        raise NotImplementedError
