"""Convert domain objects into JSON-ready structures for the controllers."""
from __future__ import annotations

import dataclasses
from datetime import date, time
from enum import Enum
from typing import Any

from ..attendance.model import Action


def to_json(value: Any) -> Any:
    if isinstance(value, Action):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, time)):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(k): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json(v) for v in value]
    return value


def with_extra(value: Any, **extra: Any) -> dict:
    """``to_json`` of a dataclass plus computed properties."""
    out = to_json(value)
    out.update({k: to_json(v) for k, v in extra.items()})
    return out
