from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.chronolog.chronolog.common.datetime_utils import to_millis


def utc_ms(day: int, hour: int, minute: int = 0, *, month: int = 1, year: int = 2025) -> int:
    """Epoch ms for a UTC wall-clock time (defaults to January 2025; the 6th is a Monday)."""
    return to_millis(datetime(year, month, day, hour, minute, tzinfo=timezone.utc))


@pytest.fixture
def fixed_now() -> int:
    # Monday 2025-01-06 18:00 UTC
    return utc_ms(6, 18)


@pytest.fixture
def ms():
    return utc_ms
