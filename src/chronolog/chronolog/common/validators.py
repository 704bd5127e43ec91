from __future__ import annotations

import re
from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_color(value: str, field_name: str = "color") -> str:
    value = require_non_empty(value, field_name)
    if not _HEX_COLOR.match(value):
        raise ValidationError(f"{field_name} must be a #RRGGBB hex color")
    return value


def require_date(value: Optional[str], field_name: str) -> date:
    try:
        return parse_iso_date((value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None


def optional_date(value: Optional[str], field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    return require_date(value, field_name)


def require_millis(value: Any, field_name: str) -> int:
    """Epoch milliseconds from a JSON number or numeric string."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a timestamp in milliseconds")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a timestamp in milliseconds") from None
