"""Conflict detection for administrative log corrections.

The corrected events keep their current position in the day's log; only
their timestamps/actions change. Intervals are then paired positionally and
checked: a pair that runs backwards, or two intervals that overlap according
to the lane packer, means the correction would reorder the log. The event
left open at the end (a live session) must not land before any earlier
event either.
"""
from __future__ import annotations

from datetime import tzinfo
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import from_millis
from ..timeline.lanes import find_overlaps
from ..timeline.model import Interval
from ..timeline.reconstructor import pair_events
from .model import AttendanceEvent, format_action


def _hhmm(ts: int, tz: Optional[tzinfo]) -> str:
    return from_millis(ts, tz).strftime("%H:%M")


def detect_correction_conflicts(
    day_events: Sequence[AttendanceEvent],
    corrections: Mapping[str, AttendanceEvent],
    *,
    tz: Optional[tzinfo] = None,
) -> list[str]:
    """Describe every conflict the corrections would introduce (empty when none).

    ``day_events`` must be one employee's events in their current log order.
    """
    corrected = [corrections.get(e.event_id, e) for e in day_events]
    pairs, trailing = pair_events(corrected)

    problems: list[str] = []
    intervals: list[Interval] = []
    for start, end in pairs:
        if end.timestamp < start.timestamp:
            problems.append(
                f"'{format_action(end.action)}' at {_hhmm(end.timestamp, tz)} would come before "
                f"'{format_action(start.action)}' at {_hhmm(start.timestamp, tz)}"
            )
            continue
        intervals.append(
            Interval(
                employee_id=start.employee_id,
                activity_label=start.action.label,
                start_time=start.timestamp,
                end_time=end.timestamp,
                start_event_id=start.event_id,
                end_event_id=end.event_id,
            )
        )

    # The still-open last event must not move before anything earlier in the log.
    if trailing is not None and len(corrected) > 1:
        latest = max(corrected[:-1], key=lambda e: e.timestamp)
        if trailing.timestamp < latest.timestamp:
            problems.append(
                f"'{format_action(trailing.action)}' at {_hhmm(trailing.timestamp, tz)} would come before "
                f"'{format_action(latest.action)}' at {_hhmm(latest.timestamp, tz)}"
            )

    for a, b in find_overlaps(intervals):
        problems.append(
            f"{a.activity_label} {_hhmm(a.start_time, tz)}-{_hhmm(a.end_time, tz)} would overlap "
            f"{b.activity_label} {_hhmm(b.start_time, tz)}-{_hhmm(b.end_time, tz)}"
        )
    return problems
