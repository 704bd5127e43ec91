from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...schedules.model import WorkSchedule


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None


class PresenceStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's presence status is decided."""

    @abstractmethod
    def decide_arrival(self, *, clock_in: datetime, schedule: Optional[WorkSchedule]) -> StatusDecision:
        raise NotImplementedError

    @abstractmethod
    def decide_departure(
        self, *, clock_out: Optional[datetime], schedule: Optional[WorkSchedule], current: AttendanceStatus
    ) -> StatusDecision:
        raise NotImplementedError
