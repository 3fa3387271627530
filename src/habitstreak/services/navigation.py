"""Selected-day navigation and status glyphs for calendar-style views."""

from __future__ import annotations

from datetime import date, timedelta

from ..clock import Clock
from ..models.habit import CompletionState

STATUS_SYMBOLS = {
    CompletionState.DONE: "✓",
    CompletionState.PARTIAL: "½",
    CompletionState.UNSET: "",
}


def status_symbol(state: CompletionState) -> str:
    return STATUS_SYMBOLS[state]


class DayCursor:
    """The day a view is showing; may move back freely but never past today."""

    def __init__(self, clock: Clock, selected: date | None = None):
        self.clock = clock
        today = clock.today()
        self.selected = min(selected, today) if selected else today

    @property
    def can_go_forward(self) -> bool:
        return self.selected < self.clock.today()

    def previous(self) -> date:
        self.selected -= timedelta(days=1)
        return self.selected

    def next(self) -> date:
        if self.can_go_forward:
            self.selected += timedelta(days=1)
        return self.selected

    @property
    def label(self) -> str:
        """Human-readable day, e.g. ``Monday, October 19``."""
        return f"{self.selected:%A, %B} {self.selected.day}"


__all__ = ["DayCursor", "STATUS_SYMBOLS", "status_symbol"]
