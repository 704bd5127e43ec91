from __future__ import annotations

from typing import Optional, Sequence

from .model import WorkSchedule
from .repository import WorkScheduleRepository


class InMemoryWorkScheduleRepository(WorkScheduleRepository):
    def __init__(self, schedules: Sequence[WorkSchedule] = ()):
        self._by_id: dict[str, WorkSchedule] = {s.schedule_id: s for s in schedules}

    def list_all(self) -> Sequence[WorkSchedule]:
        return list(self._by_id.values())

    def get_by_id(self, schedule_id: str) -> Optional[WorkSchedule]:
        return self._by_id.get(schedule_id)

    def upsert(self, schedule: WorkSchedule) -> WorkSchedule:
        self._by_id[schedule.schedule_id] = schedule
        return schedule
