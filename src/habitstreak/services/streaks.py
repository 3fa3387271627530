"""Streak calculations for habits."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Mapping

from ..models.habit import CompletionState, Habit

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True, slots=True)
class StreakResult:
    """Current streak and the best streak ever observed."""

    streak: int
    best_streak: int


def _complete(entries: Mapping[date, CompletionState], day: date) -> bool:
    return entries.get(day, CompletionState.UNSET).is_complete


def compute_streak(
    entries: Mapping[date, CompletionState], today: date, previous_best: int = 0
) -> StreakResult:
    """Return the streak ending at ``today`` and the updated best streak.

    When yesterday is unset the streak is decided by today alone (0 or 1)
    without scanning further back. Otherwise walk backwards starting at
    ``today`` and count days until the first unset one, so an unset today
    yields 0 no matter what came before. Partial days count like done days.
    """

    yesterday = today - ONE_DAY
    if not _complete(entries, yesterday) and yesterday < today:
        current = 1 if _complete(entries, today) else 0
    else:
        current = 0
        cursor = today
        while _complete(entries, cursor):
            current += 1
            cursor -= ONE_DAY

    return StreakResult(streak=current, best_streak=max(previous_best, current))


def apply_streak(habit: Habit, today: date) -> StreakResult:
    """Recompute ``habit``'s cached streak fields and replace both in one step."""

    result = compute_streak(habit.entries, today, habit.best_streak)
    habit.streak, habit.best_streak = result.streak, result.best_streak
    return result


def longest_run(entries: Mapping[date, CompletionState]) -> int:
    """Longest run of consecutive completed days anywhere in the history."""

    days = sorted(day for day, state in entries.items() if state.is_complete)
    longest = 0
    run = 0
    last_day: date | None = None
    for day in days:
        if last_day is not None and day == last_day + ONE_DAY:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = day
    return longest


__all__ = ["StreakResult", "apply_streak", "compute_streak", "longest_run"]
