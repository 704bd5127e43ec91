from datetime import date, timezone

import pytest

from src.chronolog.chronolog.core.enums import TimelineView
from src.chronolog.chronolog.timeline.windows import shift_selection, view_bounds, window_for


@pytest.mark.parametrize(
    "view, selected, expected",
    [
        (TimelineView.DAY, date(2025, 1, 8), (date(2025, 1, 8), date(2025, 1, 8))),
        # Wednesday -> Sunday..Saturday
        (TimelineView.WEEK, date(2025, 1, 8), (date(2025, 1, 5), date(2025, 1, 11))),
        (TimelineView.WEEK, date(2025, 1, 5), (date(2025, 1, 5), date(2025, 1, 11))),
        (TimelineView.MONTH, date(2024, 2, 14), (date(2024, 2, 1), date(2024, 2, 29))),
    ],
)
def test_view_bounds(view, selected, expected):
    assert view_bounds(view, selected) == expected


def test_window_is_half_open_over_whole_days(ms):
    window = window_for(TimelineView.DAY, date(2025, 1, 6), timezone.utc)

    assert window.start == ms(6, 0)
    assert window.end == ms(7, 0)
    assert window.contains(ms(6, 23, 59))
    assert not window.contains(ms(7, 0))


def test_shift_selection_clamps_month_end():
    assert shift_selection(TimelineView.MONTH, date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert shift_selection(TimelineView.MONTH, date(2025, 1, 15), -1) == date(2024, 12, 15)
    assert shift_selection(TimelineView.WEEK, date(2025, 1, 6), 1) == date(2025, 1, 13)
