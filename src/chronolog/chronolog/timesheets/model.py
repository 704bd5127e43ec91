from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus
from ..timeline.model import Interval


@dataclass(frozen=True)
class TimesheetEntry:
    """One timesheet row: an interval typed "Working" or "<activity> <n>"."""

    employee_id: str
    work_date: date
    entry_type: str
    activity_label: str
    time_in: int
    time_out: int
    is_ongoing: bool = False
    start_event_id: Optional[str] = None
    end_event_id: Optional[str] = None

    @property
    def duration_seconds(self) -> float:
        return (self.time_out - self.time_in) / 1000


@dataclass(frozen=True)
class DailyAggregate:
    employee_id: str
    work_date: date
    work_ms: int
    activity_ms: int
    intervals: tuple[Interval, ...]
    entries: tuple[TimesheetEntry, ...]

    @property
    def work_seconds(self) -> float:
        return self.work_ms / 1000

    @property
    def activity_seconds(self) -> float:
        return self.activity_ms / 1000

    @property
    def total_seconds(self) -> float:
        return (self.work_ms + self.activity_ms) / 1000


@dataclass(frozen=True)
class RangeAggregate:
    employee_id: str
    days: tuple[DailyAggregate, ...]
    work_ms: int
    activity_ms: int

    @property
    def work_seconds(self) -> float:
        return self.work_ms / 1000

    @property
    def activity_seconds(self) -> float:
        return self.activity_ms / 1000


@dataclass(frozen=True)
class TopPerformer:
    employee_id: str
    work_seconds: float


@dataclass(frozen=True)
class TimesheetStats:
    total_work_seconds: float
    total_activity_seconds: float
    unique_employees: int
    days_covered: int
    work_percentage: int
    activity_percentage: int
    avg_daily_work_seconds: float
    top_performer: Optional[TopPerformer] = None


@dataclass(frozen=True)
class DailyOverviewRow:
    """One employee's line in the "today" overview."""

    employee_id: str
    name: str
    work_date: date
    first_clock_in: Optional[int]
    last_clock_out: Optional[int]
    activity_seconds: float
    arrival: AttendanceStatus
    departure: AttendanceStatus
    is_excessive_activity: bool = False
    note: Optional[str] = None

    @property
    def presence(self) -> str:
        if self.first_clock_in is None:
            return "Absent"
        return "Done" if self.last_clock_out is not None else "Active"

    @property
    def is_late(self) -> bool:
        return self.arrival == AttendanceStatus.LATE

    @property
    def is_early_leave(self) -> bool:
        return self.departure == AttendanceStatus.EARLY_LEAVE


@dataclass(frozen=True)
class LateArrival:
    employee_id: str
    name: str
    minutes_late: int
