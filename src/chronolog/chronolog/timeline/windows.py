from __future__ import annotations

from datetime import date, timedelta, tzinfo
from typing import Optional

from ..core.enums import TimelineView
from ..common.datetime_utils import start_of_day_millis
from .model import TimeWindow


def view_bounds(view: TimelineView, selected: date) -> tuple[date, date]:
    """First and last calendar day shown by a day/week/month view.

    Weeks start on Sunday.
    """
    if view == TimelineView.DAY:
        return selected, selected
    if view == TimelineView.WEEK:
        # date.weekday(): Monday=0 .. Sunday=6
        first = selected - timedelta(days=(selected.weekday() + 1) % 7)
        return first, first + timedelta(days=6)

    first = selected.replace(day=1)
    next_month = (first + timedelta(days=32)).replace(day=1)
    return first, next_month - timedelta(days=1)


def window_for(view: TimelineView, selected: date, tz: Optional[tzinfo] = None) -> TimeWindow:
    first, last = view_bounds(view, selected)
    return TimeWindow(
        start=start_of_day_millis(first, tz),
        end=start_of_day_millis(last + timedelta(days=1), tz),
    )


def shift_selection(view: TimelineView, selected: date, steps: int) -> date:
    """Move the selected date by ``steps`` days, weeks or months."""
    if view == TimelineView.DAY:
        return selected + timedelta(days=steps)
    if view == TimelineView.WEEK:
        return selected + timedelta(weeks=steps)

    month_index = selected.year * 12 + (selected.month - 1) + steps
    year, month = divmod(month_index, 12)
    first = date(year, month + 1, 1)
    last_day = ((first + timedelta(days=32)).replace(day=1) - timedelta(days=1)).day
    return first.replace(day=min(selected.day, last_day))
