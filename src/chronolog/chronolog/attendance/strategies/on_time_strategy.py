from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...schedules.model import WorkSchedule
from .base import PresenceStrategy, StatusDecision


class OnTimeStrategy(PresenceStrategy):
    """On-time arrival, departure keeps the arrival status."""

    def decide_arrival(self, *, clock_in: datetime, schedule: Optional[WorkSchedule]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)

    def decide_departure(
        self, *, clock_out: Optional[datetime], schedule: Optional[WorkSchedule], current: AttendanceStatus
    ) -> StatusDecision:
        return StatusDecision(status=current)
