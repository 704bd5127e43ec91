from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..core.enums import EventStatus


@dataclass(frozen=True)
class LeaveCategory:
    """Calendar event type ("Vacation", "Sick", "Family Day", ...)."""

    category_id: str
    name: str
    color: str
    is_exclusive: bool = False  # only one employee may have it approved on a given day
    admin_only: bool = False  # employees cannot request it themselves
    deducts_from_balance: bool = False


@dataclass(frozen=True)
class CalendarEvent:
    """Leave request or entry spanning whole calendar days (both ends inclusive)."""

    event_id: str
    employee_id: str
    category: str
    start_date: date
    end_date: date
    status: EventStatus

    @property
    def day_count(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def overlaps(self, other: "CalendarEvent") -> bool:
        return self.start_date <= other.end_date and self.end_date >= other.start_date

    def with_status(self, status: EventStatus) -> "CalendarEvent":
        return replace(self, status=status)


@dataclass(frozen=True)
class LeaveBalance:
    employee_id: str
    accounting_days: int
    accrued_days: float
    taken_days: int
    manual_adjustment: float = 0.0

    is_configured = True

    @property
    def pending_days(self) -> float:
        return self.accrued_days + self.manual_adjustment - self.taken_days


@dataclass(frozen=True)
class LeaveBalanceNotConfigured:
    """No hire date on file: callers must warn instead of showing a zero balance."""

    employee_id: str
    reason: Optional[str] = "hire date not set"

    is_configured = False
