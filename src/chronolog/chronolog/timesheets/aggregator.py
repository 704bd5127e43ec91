"""Per-day and per-range sums over reconstructed intervals.

An interval is attributed wholly to the calendar day its start falls on, even
when it runs past midnight. Intervals are never split across buckets.
"""
from __future__ import annotations

import math
from collections import defaultdict
from datetime import date, tzinfo
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import local_date
from ..timeline.model import Interval
from .model import DailyAggregate, RangeAggregate, TimesheetEntry, TimesheetStats, TopPerformer

BucketKey = tuple[str, date]


def aggregate(intervals: Iterable[Interval], tz: Optional[tzinfo] = None) -> dict[BucketKey, DailyAggregate]:
    """Bucket intervals by ``(employee_id, start day)`` and sum work/activity time."""
    buckets: dict[BucketKey, list[Interval]] = defaultdict(list)
    for interval in sorted(intervals, key=lambda i: (i.employee_id, i.start_time)):
        if interval.duration_ms <= 0:
            continue
        buckets[(interval.employee_id, local_date(interval.start_time, tz))].append(interval)

    return {key: _build_daily(key, items) for key, items in buckets.items()}


def _build_daily(key: BucketKey, intervals: list[Interval]) -> DailyAggregate:
    employee_id, work_date = key
    counters: dict[str, int] = defaultdict(int)
    entries: list[TimesheetEntry] = []
    work_ms = 0
    activity_ms = 0

    for interval in intervals:
        if interval.is_working:
            work_ms += interval.duration_ms
            entry_type = interval.activity_label
        else:
            activity_ms += interval.duration_ms
            counters[interval.activity_label] += 1
            entry_type = f"{interval.activity_label} {counters[interval.activity_label]}"

        entries.append(
            TimesheetEntry(
                employee_id=employee_id,
                work_date=work_date,
                entry_type=entry_type,
                activity_label=interval.activity_label,
                time_in=interval.start_time,
                time_out=interval.end_time,
                is_ongoing=interval.is_ongoing,
                start_event_id=interval.start_event_id,
                end_event_id=interval.end_event_id,
            )
        )

    return DailyAggregate(
        employee_id=employee_id,
        work_date=work_date,
        work_ms=work_ms,
        activity_ms=activity_ms,
        intervals=tuple(intervals),
        entries=tuple(entries),
    )


def roll_up(daily: Mapping[BucketKey, DailyAggregate]) -> dict[str, RangeAggregate]:
    """Sum daily buckets into one range total per employee."""
    by_employee: dict[str, list[DailyAggregate]] = defaultdict(list)
    for (employee_id, _), day in daily.items():
        by_employee[employee_id].append(day)

    out: dict[str, RangeAggregate] = {}
    for employee_id, days in by_employee.items():
        days.sort(key=lambda d: d.work_date)
        out[employee_id] = RangeAggregate(
            employee_id=employee_id,
            days=tuple(days),
            work_ms=sum(d.work_ms for d in days),
            activity_ms=sum(d.activity_ms for d in days),
        )
    return out


def _percent(part: float, whole: float) -> int:
    if whole <= 0:
        return 0
    return int(math.floor(part / whole * 100 + 0.5))


def summarize(ranges: Iterable[RangeAggregate], start: date, end: date) -> TimesheetStats:
    """Headline numbers for a timesheet period (both ends inclusive)."""
    ranges = list(ranges)
    total_work = sum(r.work_seconds for r in ranges)
    total_activity = sum(r.activity_seconds for r in ranges)
    days_covered = abs((end - start).days) + 1

    top: Optional[TopPerformer] = None
    for r in ranges:
        if r.work_seconds > (top.work_seconds if top else 0):
            top = TopPerformer(employee_id=r.employee_id, work_seconds=r.work_seconds)

    avg_daily = total_work / len(ranges) / days_covered if ranges else 0.0

    return TimesheetStats(
        total_work_seconds=total_work,
        total_activity_seconds=total_activity,
        unique_employees=len(ranges),
        days_covered=days_covered,
        work_percentage=_percent(total_work, total_work + total_activity),
        activity_percentage=_percent(total_activity, total_work + total_activity),
        avg_daily_work_seconds=avg_daily,
        top_performer=top,
    )
