"""Board activity history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from memban.model.card import utcnow


@dataclass(frozen=True)
class Activity:
    """A single immutable history entry."""

    id: str
    description: str
    timestamp: datetime = field(default_factory=utcnow)

    def __str__(self) -> str:
        return f"[{self.timestamp:%Y-%m-%d %H:%M:%S}] {self.description}"


class ActivityLog:
    """Append-only record of activities in insertion order.

    Insertion order is not guaranteed to be timestamp order if entries were
    built out of order; use ``newest_first()`` for a time-sorted view.
    """

    def __init__(self) -> None:
        self._activities: list[Activity] = []

    def add(self, activity: Activity) -> None:
        self._activities.append(activity)

    @property
    def activities(self) -> tuple[Activity, ...]:
        return tuple(self._activities)

    def newest_first(self) -> list[Activity]:
        """Activities sorted by timestamp, most recent first."""
        return sorted(self._activities, key=lambda a: a.timestamp, reverse=True)

    def last(self) -> Activity | None:
        """The most recently appended activity."""
        return self._activities[-1] if self._activities else None

    def size(self) -> int:
        return len(self._activities)

    def empty(self) -> bool:
        return not self._activities

    def clear(self) -> None:
        self._activities.clear()

    def __len__(self) -> int:
        return len(self._activities)

    def __iter__(self):
        return iter(tuple(self._activities))
