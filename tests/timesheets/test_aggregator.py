from __future__ import annotations

from datetime import date, timezone

from src.chronolog.chronolog.timeline.model import Interval
from src.chronolog.chronolog.timesheets.aggregator import aggregate, roll_up, summarize

HOUR = 3600 * 1000


def iv(start, end, label="Working", employee_id="e1"):
    return Interval(employee_id=employee_id, activity_label=label, start_time=start, end_time=end)


def test_daily_totals_split_working_and_activities(ms):
    intervals = [
        iv(ms(6, 8), ms(6, 10)),
        iv(ms(6, 10), ms(6, 10, 30), "Break"),
        iv(ms(6, 10, 30), ms(6, 12)),
        iv(ms(6, 12), ms(6, 12, 30), "Break"),
        iv(ms(6, 12, 30), ms(6, 13), "Training"),
    ]

    daily = aggregate(intervals, timezone.utc)
    day = daily[("e1", date(2025, 1, 6))]

    assert day.work_ms == int(3.5 * HOUR)
    assert day.activity_ms == int(1.5 * HOUR)
    assert [e.entry_type for e in day.entries] == ["Working", "Break 1", "Working", "Break 2", "Training 1"]


def test_totals_are_conserved(ms):
    intervals = [
        iv(ms(6, 8), ms(6, 12)),
        iv(ms(6, 12), ms(6, 13), "Break"),
        iv(ms(7, 9), ms(7, 17)),
        iv(ms(7, 9), ms(7, 10), "Working", employee_id="e2"),
    ]

    daily = aggregate(intervals, timezone.utc)

    assert sum(d.work_ms + d.activity_ms for d in daily.values()) == sum(i.duration_ms for i in intervals)
    ranges = roll_up(daily)
    assert ranges["e1"].work_ms == 12 * HOUR
    assert ranges["e1"].activity_ms == HOUR
    assert [d.work_date for d in ranges["e1"].days] == [date(2025, 1, 6), date(2025, 1, 7)]


def test_aggregate_is_idempotent_and_order_independent(ms):
    intervals = [iv(ms(6, 12), ms(6, 13), "Break"), iv(ms(6, 8), ms(6, 12))]

    first = aggregate(intervals, timezone.utc)
    second = aggregate(list(reversed(intervals)), timezone.utc)

    assert first == second


def test_interval_crossing_midnight_belongs_to_start_day(ms):
    daily = aggregate([iv(ms(6, 22), ms(7, 2))], timezone.utc)

    assert list(daily) == [("e1", date(2025, 1, 6))]
    assert daily[("e1", date(2025, 1, 6))].work_ms == 4 * HOUR


def test_zero_length_intervals_are_ignored(ms):
    assert aggregate([iv(ms(6, 8), ms(6, 8))], timezone.utc) == {}


def test_summarize_period(ms):
    intervals = [
        iv(ms(6, 8), ms(6, 14)),
        iv(ms(6, 14), ms(6, 16), "Break"),
        iv(ms(6, 8), ms(6, 10), employee_id="e2"),
    ]
    ranges = roll_up(aggregate(intervals, timezone.utc)).values()

    stats = summarize(ranges, date(2025, 1, 6), date(2025, 1, 7))

    assert stats.total_work_seconds == 8 * 3600
    assert stats.total_activity_seconds == 2 * 3600
    assert stats.unique_employees == 2
    assert stats.days_covered == 2
    assert stats.work_percentage == 80
    assert stats.activity_percentage == 20
    assert stats.avg_daily_work_seconds == 8 * 3600 / 2 / 2
    assert stats.top_performer.employee_id == "e1"


def test_summarize_empty_period():
    stats = summarize([], date(2025, 1, 6), date(2025, 1, 6))

    assert stats.work_percentage == 0
    assert stats.top_performer is None
    assert stats.avg_daily_work_seconds == 0
