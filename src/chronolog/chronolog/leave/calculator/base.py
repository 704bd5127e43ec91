from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, Optional, Union

from ..model import CalendarEvent, LeaveBalance, LeaveBalanceNotConfigured


class LeaveCalculator(ABC):
    """Calculator interface (Strategy Pattern for leave accrual)."""

    @abstractmethod
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
        raise NotImplementedError
