from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Employee role, used for admin-only leave categories."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class ActionKind(str, Enum):
    """Kind of an attendance log action."""

    CLOCK_IN = "CLOCK_IN"
    CLOCK_OUT = "CLOCK_OUT"
    START_ACTIVITY = "START_ACTIVITY"
    END_ACTIVITY = "END_ACTIVITY"


class AttendanceStatus(str, Enum):
    """Daily presence status decided against a work schedule."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    ABSENT = "ABSENT"
    UNKNOWN = "UNKNOWN"


class EventStatus(str, Enum):
    """Approval state of a calendar (leave) event."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TimelineView(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
