from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..core.constants import DEFAULT_GRACE_PERIOD_MINUTES
from ..core.enums import AttendanceStatus
from ..schedules.model import WorkSchedule
from .strategies.base import PresenceStrategy
from .strategies.early_leave_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class PresenceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the work schedule."""

    grace_minutes: int = DEFAULT_GRACE_PERIOD_MINUTES

    def for_arrival(self, *, clock_in: datetime, schedule: Optional[WorkSchedule]) -> PresenceStrategy:
        if not schedule or not schedule.works_on(clock_in.date()):
            return OnTimeStrategy()

        start = datetime.combine(clock_in.date(), schedule.start_time, tzinfo=clock_in.tzinfo)
        if clock_in <= start + timedelta(minutes=self.grace_minutes):
            return OnTimeStrategy()
        return LateStrategy()

    def for_departure(
        self, *, clock_out: Optional[datetime], schedule: Optional[WorkSchedule], current: AttendanceStatus
    ) -> PresenceStrategy:
        if not schedule or clock_out is None or not schedule.works_on(clock_out.date()):
            return OnTimeStrategy()

        end = datetime.combine(clock_out.date(), schedule.end_time, tzinfo=clock_out.tzinfo)
        if clock_out < end - timedelta(minutes=self.grace_minutes):
            return EarlyLeaveStrategy()
        return OnTimeStrategy()
