from __future__ import annotations

from src.chronolog.chronolog.attendance.model import Action, AttendanceEvent, EmployeeState
from src.chronolog.chronolog.timeline.model import TimeWindow
from src.chronolog.chronolog.timeline.reconstructor import pair_events, reconstruct, reconstruct_all


def ev(event_id, action, ts, employee_id="e1"):
    return AttendanceEvent(event_id=event_id, employee_id=employee_id, action=action, timestamp=ts)


def test_simple_day_with_break(ms, fixed_now):
    events = [
        ev("1", Action.clock_in(), ms(6, 8)),
        ev("2", Action.start("Break"), ms(6, 10)),
        ev("3", Action.end("Break"), ms(6, 10, 15)),
        ev("4", Action.clock_out(), ms(6, 16)),
    ]

    intervals = reconstruct(events, fixed_now)

    assert [(i.activity_label, i.start_time, i.end_time) for i in intervals] == [
        ("Working", ms(6, 8), ms(6, 10)),
        ("Break", ms(6, 10), ms(6, 10, 15)),
        ("Working", ms(6, 10, 15), ms(6, 16)),
    ]
    assert not any(i.is_ongoing for i in intervals)
    assert intervals[1].start_event_id == "2"
    assert intervals[1].end_event_id == "3"


def test_events_are_sorted_before_pairing(ms, fixed_now):
    events = [
        ev("2", Action.clock_out(), ms(6, 12)),
        ev("1", Action.clock_in(), ms(6, 8)),
    ]

    intervals = reconstruct(events, fixed_now)

    assert len(intervals) == 1
    assert intervals[0].duration_ms == 4 * 3600 * 1000


def test_orphan_trailing_event_is_dropped_when_state_does_not_match(ms, fixed_now):
    events = [ev("1", Action.clock_in(), ms(6, 8))]

    assert reconstruct(events, fixed_now) == []
    assert reconstruct(events, fixed_now, state=EmployeeState("Clocked Out", None)) == []
    # Start time off by one millisecond
    assert reconstruct(events, fixed_now, state=EmployeeState("Working", ms(6, 8) + 1)) == []


def test_trailing_event_is_ongoing_when_live_state_matches(ms, fixed_now):
    events = [
        ev("1", Action.clock_in(), ms(6, 8)),
        ev("2", Action.start("Break"), ms(6, 17)),
    ]

    intervals = reconstruct(events, fixed_now, state=EmployeeState("Break", ms(6, 17)))

    assert intervals[-1].activity_label == "Break"
    assert intervals[-1].is_ongoing
    assert intervals[-1].end_time == fixed_now
    assert intervals[-1].end_event_id is None


def test_back_to_back_clock_ins_pair_positionally(ms, fixed_now):
    events = [
        ev("1", Action.clock_in(), ms(6, 8)),
        ev("2", Action.clock_in(), ms(6, 9)),
        ev("3", Action.clock_out(), ms(6, 12)),
    ]

    intervals = reconstruct(events, fixed_now)

    assert [(i.start_time, i.end_time) for i in intervals] == [(ms(6, 8), ms(6, 9)), (ms(6, 9), ms(6, 12))]


def test_mismatched_end_still_closes_open_activity(ms, fixed_now):
    events = [
        ev("1", Action.start("Break"), ms(6, 10)),
        ev("2", Action.end("Training"), ms(6, 10, 30)),
        ev("3", Action.clock_out(), ms(6, 11)),
    ]

    intervals = reconstruct(events, fixed_now)

    assert [i.activity_label for i in intervals] == ["Break", "Working"]


def test_clock_out_closes_and_opens_nothing(ms, fixed_now):
    events = [
        ev("1", Action.clock_out(), ms(6, 7)),
        ev("2", Action.clock_in(), ms(6, 8)),
        ev("3", Action.clock_out(), ms(6, 9)),
    ]

    pairs, trailing = pair_events(events)

    assert [(a.event_id, b.event_id) for a, b in pairs] == [("2", "3")]
    assert trailing is None


def test_window_clamps_intervals(ms, fixed_now):
    events = [
        ev("1", Action.clock_in(), ms(5, 22)),
        ev("2", Action.clock_out(), ms(6, 2)),
        ev("3", Action.clock_in(), ms(7, 1)),
        ev("4", Action.clock_out(), ms(7, 2)),
    ]
    window = TimeWindow(start=ms(6, 0), end=ms(7, 0))

    intervals = reconstruct(events, fixed_now, window=window)

    assert len(intervals) == 1
    assert intervals[0].start_time == ms(6, 0)
    assert intervals[0].end_time == ms(6, 2)


def test_zero_length_pairs_are_dropped(ms, fixed_now):
    events = [
        ev("1", Action.clock_in(), ms(6, 8)),
        ev("2", Action.start("Break"), ms(6, 8)),
        ev("3", Action.clock_out(), ms(6, 9)),
    ]

    intervals = reconstruct(events, fixed_now)

    assert [(i.activity_label, i.start_time) for i in intervals] == [("Break", ms(6, 8))]


def test_no_interval_ever_ends_before_it_starts(ms, fixed_now):
    events = [
        ev("1", Action.clock_in(), ms(6, 9)),
        ev("2", Action.start("Break"), ms(6, 9)),
        ev("3", Action.end("Break"), ms(6, 8)),
        ev("4", Action.clock_in(), ms(6, 7)),
        ev("5", Action.clock_out(), ms(6, 10)),
    ]

    for interval in reconstruct(events, fixed_now, state=EmployeeState("Working", ms(6, 9))):
        assert interval.end_time > interval.start_time


def test_reconstruct_all_keeps_employees_apart(ms, fixed_now):
    events = [
        ev("1", Action.clock_in(), ms(6, 8), employee_id="a"),
        ev("2", Action.clock_in(), ms(6, 9), employee_id="b"),
        ev("3", Action.clock_out(), ms(6, 10), employee_id="a"),
        ev("4", Action.clock_out(), ms(6, 11), employee_id="b"),
    ]

    intervals = reconstruct_all(events, fixed_now)

    by_employee = {i.employee_id: (i.start_time, i.end_time) for i in intervals}
    assert by_employee == {"a": (ms(6, 8), ms(6, 10)), "b": (ms(6, 9), ms(6, 11))}
