from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_millis() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Map a setting value to a tzinfo. Empty or "local" means the machine's local time."""
    if not name or name.lower() == "local":
        return None
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def to_millis(value: datetime) -> int:
    """Milliseconds since epoch. Naive datetimes are read as local time."""
    return int(round(value.timestamp() * 1000))


def from_millis(ms: int, tz: Optional[tzinfo] = None) -> datetime:
    if tz is None:
        return datetime.fromtimestamp(ms / 1000)
    return datetime.fromtimestamp(ms / 1000, tz)


def local_date(ms: int, tz: Optional[tzinfo] = None) -> date:
    """Calendar date a timestamp falls on, midnight day boundary in ``tz``."""
    return from_millis(ms, tz).date()


def start_of_day_millis(day: date, tz: Optional[tzinfo] = None) -> int:
    return to_millis(datetime.combine(day, time.min, tzinfo=tz))


def day_range_millis(start: date, end: date, tz: Optional[tzinfo] = None) -> tuple[int, int]:
    """Half-open ``[start 00:00, (end + 1 day) 00:00)`` in milliseconds."""
    return start_of_day_millis(start, tz), start_of_day_millis(end + timedelta(days=1), tz)
