from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import EmployeeState
from ..core.constants import CLOCKED_OUT_STATUS
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object, no storage access. ``status`` is the live activity
    label ("Working", "Break", ...) or "Clocked Out".
    """

    employee_id: str
    name: str
    email: str = ""
    location: str = ""
    role: Role = Role.EMPLOYEE
    status: str = CLOCKED_OUT_STATUS
    last_clock_in_time: Optional[int] = None
    current_status_start_time: Optional[int] = None
    work_schedule_id: Optional[str] = None
    hire_date: Optional[date] = None
    termination_date: Optional[date] = None
    manual_leave_adjustment: float = 0.0

    @property
    def state(self) -> EmployeeState:
        return EmployeeState(status=self.status, current_status_start_time=self.current_status_start_time)

    @property
    def is_clocked_out(self) -> bool:
        return self.status == CLOCKED_OUT_STATUS
