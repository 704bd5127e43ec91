from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Action, AttendanceEvent


class AttendanceEventRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def list_between(
        self,
        *,
        start: int,
        end: int,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceEvent]:
        """Events with ``start <= timestamp < end``, in insertion order."""

        raise NotImplementedError

    def get_by_id(self, event_id: str) -> Optional[AttendanceEvent]:
        raise NotImplementedError

    def add(self, *, employee_id: str, action: Action, timestamp: int) -> AttendanceEvent:
        raise NotImplementedError

    def update(self, event: AttendanceEvent) -> bool:
        """Replace the stored event with the same id (administrative correction)."""

        raise NotImplementedError
