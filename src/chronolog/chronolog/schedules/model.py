from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time


@dataclass(frozen=True)
class WorkSchedule:
    """Domain entity: recurring work schedule ("Morning Shift" 08:00-16:00 Mon-Fri)."""

    schedule_id: str
    name: str
    start_time: time
    end_time: time
    days: tuple[int, ...] = (1, 2, 3, 4, 5)  # 0 = Sunday ... 6 = Saturday

    def works_on(self, day: date) -> bool:
        return (day.weekday() + 1) % 7 in self.days
