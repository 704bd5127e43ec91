from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.constants import WORKING_LABEL


@dataclass(frozen=True)
class TimeWindow:
    """Half-open display range ``[start, end)`` in epoch milliseconds."""

    start: int
    end: int

    def contains(self, ts: int) -> bool:
        return self.start <= ts < self.end


@dataclass(frozen=True)
class Interval:
    """Derived ``[start_time, end_time)`` span of one activity for one employee."""

    employee_id: str
    activity_label: str
    start_time: int
    end_time: int
    is_ongoing: bool = False
    start_event_id: Optional[str] = None
    end_event_id: Optional[str] = None

    @property
    def duration_ms(self) -> int:
        return self.end_time - self.start_time

    @property
    def duration_seconds(self) -> float:
        return self.duration_ms / 1000

    @property
    def is_working(self) -> bool:
        return self.activity_label == WORKING_LABEL

    def clamp(self, window: TimeWindow) -> Optional["Interval"]:
        """Truncate to ``window``; ``None`` when nothing of positive length remains."""
        start = max(self.start_time, window.start)
        end = min(self.end_time, window.end)
        if end <= start:
            return None
        return replace(self, start_time=start, end_time=end)


@dataclass(frozen=True)
class Segment:
    """Interval placed on a non-overlapping display lane."""

    interval: Interval
    lane: int

    @property
    def employee_id(self) -> str:
        return self.interval.employee_id

    @property
    def activity_label(self) -> str:
        return self.interval.activity_label

    @property
    def start_time(self) -> int:
        return self.interval.start_time

    @property
    def end_time(self) -> int:
        return self.interval.end_time

    @property
    def is_ongoing(self) -> bool:
        return self.interval.is_ongoing


@dataclass(frozen=True)
class EmployeeTimeline:
    """One timeline row: an employee's segments packed into lanes."""

    employee_id: str
    name: str
    segments: tuple[Segment, ...]
    lane_count: int


@dataclass(frozen=True)
class Timeline:
    window: TimeWindow
    rows: tuple[EmployeeTimeline, ...]
    colors: dict[str, str]
