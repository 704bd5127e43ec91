"""Default categories and demo employees for the in-memory store."""
from __future__ import annotations

import logging
from datetime import time

from ..activities.model import ActivityCategory
from ..core.enums import Role
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..leave.model import LeaveCategory
from ..schedules.model import WorkSchedule

logger = logging.getLogger(__name__)

DEFAULT_SCHEDULES = (
    WorkSchedule(schedule_id="1", name="Morning Shift", start_time=time(8, 0), end_time=time(16, 0), days=(1, 2, 3, 4, 5)),
)

DEFAULT_ACTIVITIES = (
    ActivityCategory(category_id="1", name="Break", color="#AE8F60"),
    ActivityCategory(category_id="2", name="Training", color="#3B82F6"),
)

# Only Vacation counts against the accrued balance.
DEFAULT_LEAVE_CATEGORIES = (
    LeaveCategory(category_id="1", name="Vacation", color="#10B981", deducts_from_balance=True),
    LeaveCategory(category_id="2", name="Sick", color="#3B82F6", admin_only=True),
    LeaveCategory(category_id="3", name="Family Day", color="#F59E0B", is_exclusive=True),
)

DEMO_EMPLOYEES = (
    Employee(employee_id="1", name="Lucius", email="lucius@example.com", location="Main Office", role=Role.ADMIN),
    Employee(employee_id="2", name="Hunter", email="hunter@example.com", location="Remote"),
    Employee(employee_id="3", name="Bokara", email="bokara@example.com", location="Main Office"),
    Employee(employee_id="4", name="Sandy", email="sandy@example.com", location="Field Office"),
)


def seed_demo_employees(employees: EmployeeRepository) -> int:
    """Add the demo employees that are not there yet; returns how many were added."""
    added = 0
    for employee in DEMO_EMPLOYEES:
        if employees.get_by_id(employee.employee_id):
            continue
        employees.add(employee)
        added += 1
    logger.info("Demo employees ready (%d added)", added)
    return added
