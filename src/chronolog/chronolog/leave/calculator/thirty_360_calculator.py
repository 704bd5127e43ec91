"""Leave accrual on the 30/360 accounting convention.

Every month counts as 30 days and every year as 360, so accrual does not
depend on actual month lengths. Taken days, on the other hand, are counted
on the real calendar.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Union

from ...core.constants import ACCOUNTING_DAYS_PER_MONTH, ACCOUNTING_DAYS_PER_YEAR, DEFAULT_LEAVE_DAYS_PER_YEAR
from ...core.enums import EventStatus
from ..model import CalendarEvent, LeaveBalance, LeaveBalanceNotConfigured
from .base import LeaveCalculator


def normalize_day(d: date) -> tuple[int, int, int]:
    """Day 31, or day >= 28 in February, counts as day 30."""
    day = d.day
    if day == 31 or (d.month == 2 and day >= 28):
        day = 30
    return d.year, d.month, day


def accounting_days(start: date, end: date) -> int:
    """Inclusive 30/360 day count between ``start`` and ``end``."""
    y1, m1, d1 = normalize_day(start)
    y2, m2, d2 = normalize_day(end)
    return (y2 - y1) * ACCOUNTING_DAYS_PER_YEAR + (m2 - m1) * ACCOUNTING_DAYS_PER_MONTH + (d2 - d1) + 1


def taken_days(employee_id: str, events: Iterable[CalendarEvent]) -> int:
    return sum(
        e.day_count
        for e in events
        if e.employee_id == employee_id and e.status == EventStatus.APPROVED
    )


class Thirty360LeaveCalculator(LeaveCalculator):
    """Standard rule: ``days_per_year`` accrued per 360 accounting days."""

    def __init__(self, *, days_per_year: float = DEFAULT_LEAVE_DAYS_PER_YEAR):
        self._days_per_year = days_per_year

    def compute_balance(
        self,
        *,
        employee_id: str,
        hire_date: Optional[date],
        termination_date: Optional[date],
        manual_adjustment: float,
        approved_leave_events: Iterable[CalendarEvent],
        now: date,
    ) -> Union[LeaveBalance, LeaveBalanceNotConfigured]:
        if hire_date is None:
            return LeaveBalanceNotConfigured(employee_id=employee_id)

        days = accounting_days(hire_date, termination_date or now)
        return LeaveBalance(
            employee_id=employee_id,
            accounting_days=days,
            accrued_days=days * self._days_per_year / ACCOUNTING_DAYS_PER_YEAR,
            taken_days=taken_days(employee_id, approved_leave_events),
            manual_adjustment=float(manual_adjustment or 0),
        )
