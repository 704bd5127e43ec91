from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from types import ModuleType
from typing import Optional

from .activities.registry import ActivityRegistry
from .attendance.factory import PresenceStrategyFactory
from .attendance.memory_attendance_repository import InMemoryAttendanceEventRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import resolve_timezone
from .core import constants
from .database.seed import DEFAULT_ACTIVITIES, DEFAULT_LEAVE_CATEGORIES, DEFAULT_SCHEDULES, seed_demo_employees
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .leave.calculator.thirty_360_calculator import Thirty360LeaveCalculator
from .leave.memory_leave_repository import InMemoryCalendarEventRepository, InMemoryLeaveCategoryRepository
from .leave.service import LeaveService
from .schedules.memory_schedule_repository import InMemoryWorkScheduleRepository
from .timeline.service import TimelineService
from .timesheets.service import TimesheetService


@dataclass(frozen=True)
class Container:
    tz: Optional[tzinfo]

    employees_repo: InMemoryEmployeeRepository
    attendance_repo: InMemoryAttendanceEventRepository
    schedules_repo: InMemoryWorkScheduleRepository
    calendar_repo: InMemoryCalendarEventRepository
    leave_categories_repo: InMemoryLeaveCategoryRepository
    activity_registry: ActivityRegistry

    employee_service: EmployeeService
    attendance_service: AttendanceService
    timeline_service: TimelineService
    timesheet_service: TimesheetService
    leave_service: LeaveService


def build_container(settings: Optional[ModuleType] = None) -> Container:
    """Wire repositories and services from a settings module (``config.*``)."""
    tz = resolve_timezone(getattr(settings, "TIMEZONE", None))

    employees_repo = InMemoryEmployeeRepository()
    attendance_repo = InMemoryAttendanceEventRepository()
    schedules_repo = InMemoryWorkScheduleRepository(DEFAULT_SCHEDULES)
    calendar_repo = InMemoryCalendarEventRepository()
    leave_categories_repo = InMemoryLeaveCategoryRepository(DEFAULT_LEAVE_CATEGORIES)
    activity_registry = ActivityRegistry(DEFAULT_ACTIVITIES)

    if getattr(settings, "SEED_DEMO_DATA", False):
        seed_demo_employees(employees_repo)

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo, tz=tz)
    timeline_service = TimelineService(attendance_repo, employees_repo, activity_registry, tz=tz)
    timesheet_service = TimesheetService(
        attendance_repo,
        employees_repo,
        schedules_repo,
        tz=tz,
        strategy_factory=PresenceStrategyFactory(
            grace_minutes=int(getattr(settings, "GRACE_PERIOD_MINUTES", constants.DEFAULT_GRACE_PERIOD_MINUTES))
        ),
        late_alert_grace_minutes=int(
            getattr(settings, "LATE_ALERT_GRACE_MINUTES", constants.DEFAULT_LATE_ALERT_GRACE_MINUTES)
        ),
        max_activity_seconds=int(getattr(settings, "MAX_ACTIVITY_SECONDS", constants.DEFAULT_MAX_ACTIVITY_SECONDS)),
    )
    leave_service = LeaveService(
        calendar_repo,
        leave_categories_repo,
        employees_repo,
        calculator=Thirty360LeaveCalculator(
            days_per_year=float(getattr(settings, "LEAVE_DAYS_PER_YEAR", constants.DEFAULT_LEAVE_DAYS_PER_YEAR))
        ),
    )

    return Container(
        tz=tz,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        schedules_repo=schedules_repo,
        calendar_repo=calendar_repo,
        leave_categories_repo=leave_categories_repo,
        activity_registry=activity_registry,
        employee_service=employee_service,
        attendance_service=attendance_service,
        timeline_service=timeline_service,
        timesheet_service=timesheet_service,
        leave_service=leave_service,
    )
