"""Habit tracking data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any


class CompletionState(Enum):
    """Tri-state completion of a habit on one calendar day.

    ``UNSET`` is never stored: an absent date means unset.
    """

    UNSET = "unset"
    DONE = "done"
    PARTIAL = "partial"

    def next(self) -> "CompletionState":
        """Successor in the toggle cycle ``UNSET -> DONE -> PARTIAL -> UNSET``."""
        return _SUCCESSOR[self]

    @property
    def credit(self) -> float:
        """Statistics credit: full for done, half for partial."""
        return _CREDIT[self]

    @property
    def is_complete(self) -> bool:
        """Whether the day keeps a streak alive (partial counts in full)."""
        return self is not CompletionState.UNSET

    def to_json(self) -> bool | float | None:
        """Stored representation: ``true`` for done, ``0.5`` for partial."""
        if self is CompletionState.DONE:
            return True
        if self is CompletionState.PARTIAL:
            return 0.5
        return None

    @classmethod
    def from_json(cls, value: Any) -> "CompletionState":
        if value is True:
            return cls.DONE
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0.5:
            return cls.PARTIAL
        return cls.UNSET


_SUCCESSOR = {
    CompletionState.UNSET: CompletionState.DONE,
    CompletionState.DONE: CompletionState.PARTIAL,
    CompletionState.PARTIAL: CompletionState.UNSET,
}

_CREDIT = {
    CompletionState.UNSET: 0.0,
    CompletionState.DONE: 1.0,
    CompletionState.PARTIAL: 0.5,
}


@dataclass(slots=True)
class Habit:
    """A user-defined habit tracked daily.

    ``streak`` and ``best_streak`` are cached projections of ``entries`` and are
    replaced together whenever ``entries`` changes.
    """

    id: str
    name: str
    color: str
    entries: dict[date, CompletionState] = field(default_factory=dict)
    streak: int = 0
    best_streak: int = 0

    def state_on(self, day: date) -> CompletionState:
        return self.entries.get(day, CompletionState.UNSET)


__all__ = ["CompletionState", "Habit"]
