from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.constants import CLOCKED_OUT_STATUS, WORKING_LABEL
from ..core.enums import ActionKind
from ..core.exceptions import ValidationError

_START_PREFIX = "Start "
_END_PREFIX = "End "
_CLOCK_IN = "Clock In"
_CLOCK_OUT = "Clock Out"


@dataclass(frozen=True)
class Action:
    """Attendance action: ClockIn | ClockOut | StartActivity(name) | EndActivity(name)."""

    kind: ActionKind
    activity: Optional[str] = None

    @classmethod
    def clock_in(cls) -> "Action":
        return cls(ActionKind.CLOCK_IN)

    @classmethod
    def clock_out(cls) -> "Action":
        return cls(ActionKind.CLOCK_OUT)

    @classmethod
    def start(cls, activity: str) -> "Action":
        return cls(ActionKind.START_ACTIVITY, activity)

    @classmethod
    def end(cls, activity: str) -> "Action":
        return cls(ActionKind.END_ACTIVITY, activity)

    @property
    def is_clock_out(self) -> bool:
        return self.kind == ActionKind.CLOCK_OUT

    @property
    def label(self) -> Optional[str]:
        """Activity opened by this action; ``None`` for ClockOut."""
        if self.kind == ActionKind.START_ACTIVITY:
            return self.activity
        if self.kind == ActionKind.CLOCK_OUT:
            return None
        return WORKING_LABEL

    @property
    def resulting_status(self) -> str:
        """Live employee status right after this action is recorded."""
        return self.label or CLOCKED_OUT_STATUS

    def __str__(self) -> str:
        return format_action(self)


def parse_action(value: str) -> Action:
    """Parse the wire form ("Clock In", "Start Break", ...) into an Action."""
    v = (value or "").strip()
    if v == _CLOCK_IN:
        return Action.clock_in()
    if v == _CLOCK_OUT:
        return Action.clock_out()
    if v.startswith(_START_PREFIX) and v[len(_START_PREFIX):].strip():
        return Action.start(v[len(_START_PREFIX):].strip())
    if v.startswith(_END_PREFIX) and v[len(_END_PREFIX):].strip():
        return Action.end(v[len(_END_PREFIX):].strip())
    raise ValidationError(f"Unknown attendance action: {value!r}")


def format_action(action: Action) -> str:
    if action.kind == ActionKind.CLOCK_IN:
        return _CLOCK_IN
    if action.kind == ActionKind.CLOCK_OUT:
        return _CLOCK_OUT
    if action.kind == ActionKind.START_ACTIVITY:
        return f"{_START_PREFIX}{action.activity}"
    return f"{_END_PREFIX}{action.activity}"


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one append-only attendance log entry."""

    event_id: str
    employee_id: str
    action: Action
    timestamp: int

    def corrected(self, *, action: Optional[Action] = None, timestamp: Optional[int] = None) -> "AttendanceEvent":
        """Administrative correction keeps the id and replaces action/time."""
        return replace(
            self,
            action=action if action is not None else self.action,
            timestamp=timestamp if timestamp is not None else self.timestamp,
        )


@dataclass(frozen=True)
class EmployeeState:
    """Live status of an employee, used to decide whether a trailing event is still ongoing."""

    status: str
    current_status_start_time: Optional[int]
