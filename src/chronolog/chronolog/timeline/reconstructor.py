"""Attendance log -> interval reconstruction.

The walk is purely positional: each non-ClockOut event stays open until the next
event of the same employee, whatever that next event is. Malformed logs (two
ClockIns in a row, mismatched Start/End pairs) never raise; they simply yield
intervals that may look surprising.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceEvent, EmployeeState
from ..core.constants import CLOCKED_OUT_STATUS
from .model import Interval, TimeWindow


def sort_events(events: Iterable[AttendanceEvent]) -> list[AttendanceEvent]:
    """Timestamp ascending; ties keep input order."""
    return sorted(events, key=lambda e: e.timestamp)


def pair_events(
    events: Sequence[AttendanceEvent],
) -> tuple[list[tuple[AttendanceEvent, AttendanceEvent]], Optional[AttendanceEvent]]:
    """Walk ``events`` in the given order.

    Returns the ``(open, close)`` pairs and the event still open at the end.
    No sorting and no filtering happens here, so a pair may be reversed in time
    when the input order disagrees with the timestamps.
    """
    pairs: list[tuple[AttendanceEvent, AttendanceEvent]] = []
    open_event: Optional[AttendanceEvent] = None

    for event in events:
        if open_event is not None:
            pairs.append((open_event, event))
        open_event = None if event.action.is_clock_out else event

    return pairs, open_event


def is_still_active(open_event: AttendanceEvent, state: Optional[EmployeeState]) -> bool:
    # Live status and its start time must both match the trailing event exactly.
    if state is None or state.status == CLOCKED_OUT_STATUS:
        return False
    return state.status == open_event.action.label and state.current_status_start_time == open_event.timestamp


def reconstruct(
    events: Iterable[AttendanceEvent],
    now: int,
    *,
    state: Optional[EmployeeState] = None,
    window: Optional[TimeWindow] = None,
) -> list[Interval]:
    """Rebuild one employee's intervals from the raw log."""
    pairs, trailing = pair_events(sort_events(events))

    raw: list[Interval] = [
        Interval(
            employee_id=start.employee_id,
            activity_label=start.action.label,
            start_time=start.timestamp,
            end_time=end.timestamp,
            start_event_id=start.event_id,
            end_event_id=end.event_id,
        )
        for start, end in pairs
    ]

    if trailing is not None and is_still_active(trailing, state) and now > trailing.timestamp:
        raw.append(
            Interval(
                employee_id=trailing.employee_id,
                activity_label=trailing.action.label,
                start_time=trailing.timestamp,
                end_time=now,
                is_ongoing=True,
                start_event_id=trailing.event_id,
            )
        )

    intervals: list[Interval] = []
    for interval in raw:
        if window is not None:
            interval = interval.clamp(window)
            if interval is None:
                continue
        if interval.end_time > interval.start_time:
            intervals.append(interval)
    return intervals


def group_by_employee(events: Iterable[AttendanceEvent]) -> dict[str, list[AttendanceEvent]]:
    grouped: dict[str, list[AttendanceEvent]] = defaultdict(list)
    for event in events:
        grouped[event.employee_id].append(event)
    return dict(grouped)


def reconstruct_all(
    events: Iterable[AttendanceEvent],
    now: int,
    *,
    states: Optional[Mapping[str, EmployeeState]] = None,
    window: Optional[TimeWindow] = None,
) -> list[Interval]:
    """Run :func:`reconstruct` per employee and concatenate."""
    states = states or {}
    out: list[Interval] = []
    for employee_id, employee_events in group_by_employee(events).items():
        out.extend(reconstruct(employee_events, now, state=states.get(employee_id), window=window))
    return out
