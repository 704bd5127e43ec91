from datetime import date

import pytest

from src.chronolog.chronolog.core.enums import EventStatus
from src.chronolog.chronolog.leave.calculator.thirty_360_calculator import (
    Thirty360LeaveCalculator,
    accounting_days,
    normalize_day,
)
from src.chronolog.chronolog.leave.model import CalendarEvent


def vacation(start, end, status=EventStatus.APPROVED, employee_id="e1"):
    return CalendarEvent(
        event_id=f"{start}",
        employee_id=employee_id,
        category="Vacation",
        start_date=start,
        end_date=end,
        status=status,
    )


def test_half_year_accrual():
    balance = Thirty360LeaveCalculator().compute_balance(
        employee_id="e1",
        hire_date=date(2025, 1, 1),
        termination_date=None,
        manual_adjustment=0,
        approved_leave_events=[],
        now=date(2025, 7, 1),
    )

    assert balance.accounting_days == 181
    assert balance.accrued_days == pytest.approx(7.5416667, rel=1e-6)
    assert balance.pending_days == pytest.approx(balance.accrued_days)


def test_approved_vacation_reduces_pending_days():
    calc = Thirty360LeaveCalculator()
    kwargs = dict(employee_id="e1", hire_date=date(2024, 1, 1), termination_date=None, manual_adjustment=2, now=date(2025, 1, 1))

    before = calc.compute_balance(approved_leave_events=[], **kwargs)
    after = calc.compute_balance(
        approved_leave_events=[
            vacation(date(2024, 7, 1), date(2024, 7, 5)),
            vacation(date(2024, 8, 1), date(2024, 8, 9), status=EventStatus.PENDING),
            vacation(date(2024, 9, 1), date(2024, 9, 3), employee_id="other"),
        ],
        **kwargs,
    )

    assert after.taken_days == 5
    assert before.pending_days - after.pending_days == pytest.approx(5)
    assert before.pending_days == pytest.approx(before.accrued_days + 2)


def test_termination_date_stops_accrual():
    balance = Thirty360LeaveCalculator().compute_balance(
        employee_id="e1",
        hire_date=date(2024, 1, 1),
        termination_date=date(2024, 12, 30),
        manual_adjustment=0,
        approved_leave_events=[],
        now=date(2030, 1, 1),
    )

    assert balance.accounting_days == 360
    assert balance.accrued_days == pytest.approx(15)


def test_missing_hire_date_is_not_configured():
    balance = Thirty360LeaveCalculator().compute_balance(
        employee_id="e1",
        hire_date=None,
        termination_date=None,
        manual_adjustment=3,
        approved_leave_events=[],
        now=date(2025, 1, 1),
    )

    assert balance.is_configured is False
    assert not hasattr(balance, "pending_days")


def test_month_end_normalization():
    assert normalize_day(date(2025, 1, 31)) == (2025, 1, 30)
    assert normalize_day(date(2025, 2, 28)) == (2025, 2, 30)
    assert normalize_day(date(2024, 2, 29)) == (2024, 2, 30)
    assert normalize_day(date(2024, 2, 27)) == (2024, 2, 27)
    # Feb 28 and Mar 1 are 30/360 neighbours
    assert accounting_days(date(2025, 2, 28), date(2025, 3, 1)) == 2
    assert accounting_days(date(2025, 1, 30), date(2025, 1, 31)) == 1
