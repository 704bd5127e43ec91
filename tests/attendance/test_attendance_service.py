from __future__ import annotations

from datetime import timezone

import pytest

from src.chronolog.chronolog.attendance.memory_attendance_repository import InMemoryAttendanceEventRepository
from src.chronolog.chronolog.attendance.model import Action
from src.chronolog.chronolog.attendance.service import AttendanceService
from src.chronolog.chronolog.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.chronolog.chronolog.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.chronolog.chronolog.employees.model import Employee


@pytest.fixture
def repos():
    return InMemoryAttendanceEventRepository(), InMemoryEmployeeRepository([Employee(employee_id="e1", name="Hunter")])


@pytest.fixture
def svc(repos):
    events, employees = repos
    return AttendanceService(events, employees, tz=timezone.utc)


def record_day(svc, ms):
    return [
        svc.record_action("e1", Action.clock_in(), now=ms(6, 8)),
        svc.record_action("e1", Action.start("Break"), now=ms(6, 10)),
        svc.record_action("e1", Action.end("Break"), now=ms(6, 10, 15)),
        svc.record_action("e1", Action.clock_out(), now=ms(6, 16)),
    ]


def test_record_action_updates_live_state(svc, repos, ms):
    _, employees = repos

    svc.record_action("e1", Action.clock_in(), now=ms(6, 8))
    employee = employees.get_by_id("e1")
    assert employee.status == "Working"
    assert employee.last_clock_in_time == ms(6, 8)
    assert employee.current_status_start_time == ms(6, 8)

    svc.record_action("e1", Action.start("Break"), now=ms(6, 10))
    employee = employees.get_by_id("e1")
    assert employee.status == "Break"
    assert employee.current_status_start_time == ms(6, 10)
    assert employee.last_clock_in_time == ms(6, 8)

    svc.record_action("e1", Action.clock_out(), now=ms(6, 16))
    employee = employees.get_by_id("e1")
    assert employee.is_clocked_out
    assert employee.last_clock_in_time is None
    assert employee.current_status_start_time is None


def test_record_action_unknown_employee(svc, ms):
    with pytest.raises(NotFoundError):
        svc.record_action("nobody", Action.clock_in(), now=ms(6, 8))


def test_correct_event_moves_timestamp(svc, ms, fixed_now):
    events = record_day(svc, ms)

    corrected = svc.correct_event(events[1].event_id, timestamp=ms(6, 10, 5), now=fixed_now)

    assert corrected.event_id == events[1].event_id
    assert corrected.timestamp == ms(6, 10, 5)
    assert svc.list_events("e1")[1].timestamp == ms(6, 10, 5)


def test_correct_event_rejects_future_time(svc, ms, fixed_now):
    events = record_day(svc, ms)

    with pytest.raises(ValidationError):
        svc.correct_event(events[0].event_id, timestamp=fixed_now + 1, now=fixed_now)


def test_correct_event_rejects_reordering(svc, ms, fixed_now):
    events = record_day(svc, ms)

    # Break end moved before the break start
    with pytest.raises(ConflictError):
        svc.correct_event(events[2].event_id, timestamp=ms(6, 9), now=fixed_now)

    assert svc.list_events("e1")[2].timestamp == ms(6, 10, 15)


def test_correct_event_allows_equal_timestamps(svc, ms, fixed_now):
    events = record_day(svc, ms)

    corrected = svc.correct_event(events[2].event_id, timestamp=ms(6, 10), now=fixed_now)

    assert corrected.timestamp == ms(6, 10)


def test_correct_event_can_change_action(svc, ms, fixed_now):
    events = record_day(svc, ms)

    corrected = svc.correct_event(events[1].event_id, action=Action.start("Training"), now=fixed_now)

    assert str(corrected.action) == "Start Training"


def test_update_timesheet_entry_moves_both_bounds(svc, ms):
    events = record_day(svc, ms)

    updated = svc.update_timesheet_entry(events[1].event_id, events[2].event_id, ms(6, 10, 30), ms(6, 11))

    assert [e.timestamp for e in updated] == [ms(6, 10, 30), ms(6, 11)]


def test_update_timesheet_entry_validation(svc, ms):
    events = record_day(svc, ms)

    with pytest.raises(ValidationError):
        svc.update_timesheet_entry(events[1].event_id, events[2].event_id, ms(6, 11), ms(6, 11))
    with pytest.raises(ConflictError):
        # Would swallow the clock-out
        svc.update_timesheet_entry(events[1].event_id, events[2].event_id, ms(6, 10), ms(6, 17))


def test_update_current_session_start(svc, repos, ms, fixed_now):
    _, employees = repos
    svc.record_action("e1", Action.clock_in(), now=ms(6, 9))

    employee, event = svc.update_current_session_start("e1", ms(6, 8, 30), now=fixed_now)

    assert employee.current_status_start_time == ms(6, 8, 30)
    assert employee.last_clock_in_time == ms(6, 8, 30)
    assert event.timestamp == ms(6, 8, 30)
    assert employees.get_by_id("e1").current_status_start_time == ms(6, 8, 30)


def test_update_current_session_start_requires_active_session(svc, ms, fixed_now):
    with pytest.raises(ValidationError):
        svc.update_current_session_start("e1", ms(6, 8), now=fixed_now)

    svc.record_action("e1", Action.clock_in(), now=ms(6, 9))
    with pytest.raises(ValidationError):
        svc.update_current_session_start("e1", fixed_now + 60_000, now=fixed_now)


def split_day(svc, ms):
    return [
        svc.record_action("e1", Action.clock_in(), now=ms(6, 9)),
        svc.record_action("e1", Action.clock_out(), now=ms(6, 12)),
        svc.record_action("e1", Action.clock_in(), now=ms(6, 13)),
    ]


def test_live_session_start_cannot_move_before_previous_clock_out(svc, repos, ms, fixed_now):
    _, employees = repos
    split_day(svc, ms)

    with pytest.raises(ConflictError):
        svc.update_current_session_start("e1", ms(6, 11), now=fixed_now)

    assert employees.get_by_id("e1").current_status_start_time == ms(6, 13)
    assert [e.timestamp for e in svc.list_events("e1")] == [ms(6, 9), ms(6, 12), ms(6, 13)]


def test_live_session_start_can_move_back_to_previous_clock_out(svc, ms, fixed_now):
    split_day(svc, ms)

    employee, _ = svc.update_current_session_start("e1", ms(6, 12), now=fixed_now)

    assert employee.current_status_start_time == ms(6, 12)


def test_correcting_last_event_before_earlier_entries_is_rejected(svc, ms, fixed_now):
    events = split_day(svc, ms)

    with pytest.raises(ConflictError):
        svc.correct_event(events[2].event_id, timestamp=ms(6, 11), now=fixed_now)

    assert svc.correct_event(events[2].event_id, timestamp=ms(6, 12, 30), now=fixed_now).timestamp == ms(6, 12, 30)


def test_epoch_is_a_valid_now(svc):
    event = svc.record_action("e1", Action.clock_in(), now=0)

    assert event.timestamp == 0
