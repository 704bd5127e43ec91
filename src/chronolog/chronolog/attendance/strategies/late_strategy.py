from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...schedules.model import WorkSchedule
from .base import PresenceStrategy, StatusDecision


class LateStrategy(PresenceStrategy):
    """Arrival after the schedule start plus grace."""

    def decide_arrival(self, *, clock_in: datetime, schedule: Optional[WorkSchedule]) -> StatusDecision:
        note = None
        if schedule:
            start = datetime.combine(clock_in.date(), schedule.start_time, tzinfo=clock_in.tzinfo)
            note = f"Late by {int((clock_in - start).total_seconds() // 60)} min"
        return StatusDecision(status=AttendanceStatus.LATE, note=note)

    def decide_departure(
        self, *, clock_out: Optional[datetime], schedule: Optional[WorkSchedule], current: AttendanceStatus
    ) -> StatusDecision:
        return StatusDecision(status=current)
