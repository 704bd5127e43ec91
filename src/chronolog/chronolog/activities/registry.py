"""Explicit registry of activity categories.

The reconstruction and aggregation code only ever sees opaque labels; this
registry resolves a label to its display name and color once, at the edge.
"""
from __future__ import annotations

import itertools
from typing import Iterable, Optional, Sequence

from ..common.validators import require_color, require_non_empty
from ..core.constants import DEFAULT_ACTIVITY_COLOR, DEFAULT_WORKING_COLOR, WORKING_LABEL
from ..core.exceptions import NotFoundError, ValidationError
from .model import ActivityCategory

WORKING = ActivityCategory(category_id="working", name=WORKING_LABEL, color=DEFAULT_WORKING_COLOR)


class ActivityRegistry:
    def __init__(self, categories: Iterable[ActivityCategory] = ()):
        self._by_name: dict[str, ActivityCategory] = {}
        self._ids = itertools.count(1)
        for category in categories:
            self._by_name[category.name] = category

    def list_all(self) -> Sequence[ActivityCategory]:
        return list(self._by_name.values())

    def get(self, name: str) -> Optional[ActivityCategory]:
        if name == WORKING_LABEL:
            return WORKING
        return self._by_name.get(name)

    def color_for(self, label: str) -> str:
        category = self.get(label)
        return category.color if category else DEFAULT_ACTIVITY_COLOR

    def add(self, name: str, color: str) -> ActivityCategory:
        name = require_non_empty(name, "name")
        if name == WORKING_LABEL or name in self._by_name:
            raise ValidationError(f"Activity {name!r} already exists")
        category = ActivityCategory(category_id=f"status_{next(self._ids)}", name=name, color=require_color(color))
        self._by_name[name] = category
        return category

    def remove(self, category_id: str) -> None:
        for name, category in self._by_name.items():
            if category.category_id == category_id:
                del self._by_name[name]
                return
        raise NotFoundError(f"Activity {category_id} not found")
