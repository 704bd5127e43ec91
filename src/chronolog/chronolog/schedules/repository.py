from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkSchedule


class WorkScheduleRepository(Protocol):
    def list_all(self) -> Sequence[WorkSchedule]:
        raise NotImplementedError

    def get_by_id(self, schedule_id: str) -> Optional[WorkSchedule]:
        raise NotImplementedError

    def upsert(self, schedule: WorkSchedule) -> WorkSchedule:
        raise NotImplementedError
