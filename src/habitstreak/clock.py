"""Sources for the current calendar date."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Supplies "today" as a local calendar date (no time of day)."""

    def today(self) -> date:  # pragma: no cover - interface
        ...


class SystemClock:
    """Local wall-clock date of the running process."""

    def today(self) -> date:
        return date.today()


@dataclass(slots=True)
class FixedClock:
    """Clock pinned to a single date; used by tests and the CLI ``--today`` override."""

    day: date

    def today(self) -> date:
        return self.day


__all__ = ["Clock", "FixedClock", "SystemClock"]
