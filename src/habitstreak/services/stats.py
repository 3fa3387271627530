"""Completion statistics derived on demand from a habit's entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Mapping

from ..models.habit import CompletionState, Habit
from .streaks import longest_run

WEEK_DAYS = 7


@dataclass(frozen=True, slots=True)
class CompletionCounts:
    """Lifetime totals of done and partial entries."""

    completed: int
    partial: int


@dataclass(frozen=True, slots=True)
class ChartPoint:
    """One bar of the recent-days chart."""

    label: str
    value: float


@dataclass(frozen=True, slots=True)
class HabitSummary:
    """A row of the statistics view."""

    name: str
    streak: int
    best_streak: int
    weekly_rate: int
    completed: int
    partial: int
    longest_run: int


def _window(today: date, window_days: int) -> list[date]:
    return [today - timedelta(days=offset) for offset in range(window_days - 1, -1, -1)]


def weekly_completion_rate(entries: Mapping[date, CompletionState], today: date) -> int:
    """Percentage of credit earned over ``[today - 6, today]``.

    Done earns a full day, partial half a day. Rounded to the nearest whole
    percent (halves round up); an empty window is 0.
    """

    days = [day for day in _window(today, WEEK_DAYS) if day <= today]
    if not days:
        return 0
    credit = sum(entries.get(day, CompletionState.UNSET).credit for day in days)
    return int(credit / len(days) * 100 + 0.5)


def format_rate(rate: int) -> str:
    return f"{rate}%"


def aggregate_counts(entries: Mapping[date, CompletionState]) -> CompletionCounts:
    """Count done and partial entries across the whole history."""

    completed = 0
    partial = 0
    for state in entries.values():
        if state is CompletionState.DONE:
            completed += 1
        elif state is CompletionState.PARTIAL:
            partial += 1
    return CompletionCounts(completed=completed, partial=partial)


def chart_series(
    entries: Mapping[date, CompletionState], today: date, window_days: int = WEEK_DAYS
) -> Iterator[ChartPoint]:
    """Yield ``(MM-DD, value)`` points for the last ``window_days`` days, oldest first.

    Values are 1 for done, 0.5 for partial and 0 otherwise. Nothing is cached;
    each call walks the window afresh.
    """

    for day in _window(today, window_days):
        yield ChartPoint(label=day.strftime("%m-%d"), value=state_value(entries, day))


def state_value(entries: Mapping[date, CompletionState], day: date) -> float:
    return entries.get(day, CompletionState.UNSET).credit


def summarize(habit: Habit, today: date) -> HabitSummary:
    counts = aggregate_counts(habit.entries)
    return HabitSummary(
        name=habit.name,
        streak=habit.streak,
        best_streak=habit.best_streak,
        weekly_rate=weekly_completion_rate(habit.entries, today),
        completed=counts.completed,
        partial=counts.partial,
        longest_run=longest_run(habit.entries),
    )


__all__ = [
    "ChartPoint",
    "CompletionCounts",
    "HabitSummary",
    "aggregate_counts",
    "chart_series",
    "format_rate",
    "summarize",
    "weekly_completion_rate",
]
