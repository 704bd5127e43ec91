from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def add(
        self,
        *,
        name: str,
        email: str = "",
        location: str = "",
        role: Role = Role.EMPLOYEE,
        work_schedule_id: Optional[str] = None,
        hire_date: Optional[date] = None,
    ) -> Employee:
        employee = Employee(
            employee_id=uuid.uuid4().hex,
            name=require_non_empty(name, "name"),
            email=(email or "").strip(),
            location=(location or "").strip(),
            role=role,
            work_schedule_id=work_schedule_id,
            hire_date=hire_date,
        )
        logger.info("Added employee %s (%s)", employee.name, employee.employee_id)
        return self._employees.add(employee)

    def update_leave_settings(
        self,
        employee_id: str,
        *,
        hire_date: Optional[date],
        termination_date: Optional[date] = None,
        manual_leave_adjustment: float = 0.0,
    ) -> Employee:
        employee = self.get(employee_id)
        if hire_date and termination_date and termination_date < hire_date:
            raise ValidationError("Termination date must not be before the hire date")

        updated = replace(
            employee,
            hire_date=hire_date,
            termination_date=termination_date,
            manual_leave_adjustment=float(manual_leave_adjustment or 0),
        )
        self._employees.update(updated)
        return updated

    def remove(self, employee_id: str) -> None:
        employee = self.get(employee_id)
        if not employee.is_clocked_out:
            raise ValidationError("Cannot remove an employee who has not clocked out")
        self._employees.remove(employee_id)
        logger.info("Removed employee %s", employee_id)
