from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...schedules.model import WorkSchedule
from .base import PresenceStrategy, StatusDecision


class EarlyLeaveStrategy(PresenceStrategy):
    """Clock-out before the schedule end minus grace."""

    def decide_arrival(self, *, clock_in: datetime, schedule: Optional[WorkSchedule]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.UNKNOWN)

    def decide_departure(
        self, *, clock_out: Optional[datetime], schedule: Optional[WorkSchedule], current: AttendanceStatus
    ) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.EARLY_LEAVE)
