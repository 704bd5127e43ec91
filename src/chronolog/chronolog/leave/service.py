from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence, Union

from ..core.enums import EventStatus, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .calculator.base import LeaveCalculator
from .calculator.thirty_360_calculator import Thirty360LeaveCalculator
from .model import CalendarEvent, LeaveBalance, LeaveBalanceNotConfigured, LeaveCategory
from .repository import CalendarEventRepository, LeaveCategoryRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Leave requests, their approval workflow and the resulting balances."""

    def __init__(
        self,
        events: CalendarEventRepository,
        categories: LeaveCategoryRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[LeaveCalculator] = None,
    ):
        self._events = events
        self._categories = categories
        self._employees = employees
        self._calculator = calculator or Thirty360LeaveCalculator()

    def _get_category(self, name: str) -> LeaveCategory:
        category = self._categories.get_by_name(name)
        if not category:
            raise NotFoundError(f"Leave category {name!r} not found")
        return category

    def _get_event(self, event_id: str) -> CalendarEvent:
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError(f"Calendar event {event_id} not found")
        return event

    def _ensure_employee(self, employee_id: str) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")

    def _ensure_no_overlap(self, employee_id: str, start: date, end: date) -> None:
        for existing in self._events.list_for_employee(employee_id):
            if existing.status == EventStatus.REJECTED:
                continue
            if start <= existing.end_date and end >= existing.start_date:
                raise ConflictError(
                    f"Employee already has {existing.category} from {existing.start_date} to {existing.end_date}"
                )

    def _create(
        self,
        *,
        employee_id: str,
        category: str,
        start_date: date,
        end_date: date,
        status: EventStatus,
    ) -> CalendarEvent:
        self._ensure_employee(employee_id)
        self._get_category(category)
        if end_date < start_date:
            raise ValidationError("End date must be on or after the start date")
        self._ensure_no_overlap(employee_id, start_date, end_date)

        event = self._events.add(
            employee_id=employee_id,
            category=category,
            start_date=start_date,
            end_date=end_date,
            status=status,
        )
        logger.info("Calendar event %s (%s) created for %s as %s", event.event_id, category, employee_id, status.value)
        return event

    def request_leave(
        self,
        *,
        current_role: Role,
        employee_id: str,
        category: str,
        start_date: date,
        end_date: date,
    ) -> CalendarEvent:
        if self._get_category(category).admin_only and current_role != Role.ADMIN:
            raise AuthorizationError(f"{category} can only be assigned by an administrator")
        return self._create(
            employee_id=employee_id,
            category=category,
            start_date=start_date,
            end_date=end_date,
            status=EventStatus.PENDING,
        )

    def add_event(
        self,
        *,
        employee_id: str,
        category: str,
        start_date: date,
        end_date: date,
        status: EventStatus = EventStatus.APPROVED,
    ) -> CalendarEvent:
        return self._create(
            employee_id=employee_id,
            category=category,
            start_date=start_date,
            end_date=end_date,
            status=status,
        )

    def approve(self, event_id: str) -> CalendarEvent:
        event = self._get_event(event_id)
        if event.status != EventStatus.PENDING:
            raise ValidationError("Request has already been decided")

        if self._get_category(event.category).is_exclusive:
            for other in self._events.list_all(status=EventStatus.APPROVED):
                if other.category == event.category and other.employee_id != event.employee_id and other.overlaps(event):
                    raise ConflictError(
                        f"{event.category} is already approved for another employee between "
                        f"{max(other.start_date, event.start_date)} and {min(other.end_date, event.end_date)}"
                    )

        return self._decide(event, EventStatus.APPROVED)

    def reject(self, event_id: str) -> CalendarEvent:
        event = self._get_event(event_id)
        if event.status != EventStatus.PENDING:
            raise ValidationError("Request has already been decided")
        return self._decide(event, EventStatus.REJECTED)

    def _decide(self, event: CalendarEvent, status: EventStatus) -> CalendarEvent:
        decided = event.with_status(status)
        self._events.update(decided)
        logger.info("Calendar event %s %s", event.event_id, status.value)
        return decided

    def remove(self, event_id: str) -> None:
        if not self._events.remove(event_id):
            raise NotFoundError(f"Calendar event {event_id} not found")

    def list_pending(self) -> Sequence[CalendarEvent]:
        return sorted(self._events.list_all(status=EventStatus.PENDING), key=lambda e: e.start_date)

    def list_for_employee(self, employee_id: str) -> Sequence[CalendarEvent]:
        return sorted(self._events.list_for_employee(employee_id), key=lambda e: e.start_date)

    def balance(self, employee_id: str, *, today: date) -> Union[LeaveBalance, LeaveBalanceNotConfigured]:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        deducting = {c.name for c in self._categories.list_all() if c.deducts_from_balance}
        approved = [
            e
            for e in self._events.list_for_employee(employee_id)
            if e.status == EventStatus.APPROVED and e.category in deducting
        ]
        return self._calculator.compute_balance(
            employee_id=employee_id,
            hire_date=employee.hire_date,
            termination_date=employee.termination_date,
            manual_adjustment=employee.manual_leave_adjustment,
            approved_leave_events=approved,
            now=today,
        )
