from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ActivityCategory:
    """Display entry for an activity label ("Break", "Training", ...)."""

    category_id: str
    name: str
    color: str
