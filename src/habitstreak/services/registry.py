"""Habit registry: the ordered habit collection and its mutations."""

from __future__ import annotations

import random
import time
from datetime import date
from typing import Iterator, Optional

from ..clock import Clock, SystemClock
from ..logging_config import get_logger
from ..models.habit import CompletionState, Habit
from .entries import toggle_entry
from .habit_store import HabitStore
from .streaks import apply_streak

logger = get_logger(__name__)

PALETTE = ("#FF5733", "#33A1FD", "#33FD92", "#A64DFF", "#FF4D94", "#FFD700", "#4CAF50")


def _is_blank(name: Optional[str]) -> bool:
    return name is None or not name.strip()


class HabitRegistry:
    """Insertion-ordered habits, persisted as a whole after every mutation.

    Declined operations (blank names, unknown ids, future dates) leave state
    untouched and skip the write.
    """

    def __init__(
        self,
        store: HabitStore,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ):
        self.store = store
        self.clock = clock or SystemClock()
        self.rng = rng or random.Random()
        self._habits: list[Habit] = store.load()
        self._last_issued = max(
            (int(h.id) for h in self._habits if h.id.isdecimal()), default=0
        )

    # -- read access -----------------------------------------------------

    @property
    def habits(self) -> tuple[Habit, ...]:
        return tuple(self._habits)

    def __len__(self) -> int:
        return len(self._habits)

    def __iter__(self) -> Iterator[Habit]:
        return iter(tuple(self._habits))

    def get(self, habit_id: str) -> Optional[Habit]:
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    # -- mutations -------------------------------------------------------

    def add(self, name: str, color: str | None = None) -> Optional[Habit]:
        """Append a new habit; returns ``None`` when the name is blank."""

        if _is_blank(name):
            logger.debug("Declined add: blank habit name")
            return None
        habit = Habit(id=self._next_id(), name=name, color=color or self.rng.choice(PALETTE))
        self._habits.append(habit)
        self._persist()
        logger.info("Habit added", extra={"habit_id": habit.id, "habit_name": habit.name})
        return habit

    def rename(self, habit_id: str, name: str) -> bool:
        habit = self.get(habit_id)
        if habit is None or _is_blank(name):
            logger.debug("Declined rename", extra={"habit_id": habit_id})
            return False
        habit.name = name
        self._persist()
        logger.info("Habit renamed", extra={"habit_id": habit_id, "habit_name": name})
        return True

    def delete(self, habit_id: str) -> bool:
        """Remove a habit and all of its entries; confirmation happens before this call."""

        habit = self.get(habit_id)
        if habit is None:
            logger.debug("Declined delete: unknown habit", extra={"habit_id": habit_id})
            return False
        self._habits.remove(habit)
        self._persist()
        logger.info("Habit deleted", extra={"habit_id": habit_id, "entries": len(habit.entries)})
        return True

    def toggle_completion(self, habit_id: str, day: date) -> Optional[CompletionState]:
        """Cycle the habit's state for ``day`` and refresh its streak fields.

        Returns the new state, or ``None`` for an unknown habit or a day after today.
        """

        habit = self.get(habit_id)
        today = self.clock.today()
        if habit is None or day > today:
            logger.debug(
                "Declined toggle",
                extra={"habit_id": habit_id, "day": day.isoformat(), "today": today.isoformat()},
            )
            return None
        state = toggle_entry(habit.entries, day)
        result = apply_streak(habit, today)
        self._persist()
        logger.info(
            "Habit toggled",
            extra={
                "habit_id": habit_id,
                "day": day.isoformat(),
                "state": state.value,
                "streak": result.streak,
                "best_streak": result.best_streak,
            },
        )
        return state

    def refresh_streaks(self) -> bool:
        """Recompute cached streaks against today's date; persist if any changed."""

        today = self.clock.today()
        changed = False
        for habit in self._habits:
            before = (habit.streak, habit.best_streak)
            apply_streak(habit, today)
            changed = changed or before != (habit.streak, habit.best_streak)
        if changed:
            self._persist()
            logger.info("Streaks refreshed", extra={"today": today.isoformat()})
        return changed

    # -- internals -------------------------------------------------------

    def _next_id(self) -> str:
        # Millisecond timestamps, bumped so ids only ever increase.
        self._last_issued = max(time.time_ns() // 1_000_000, self._last_issued + 1)
        return str(self._last_issued)

    def _persist(self) -> None:
        self.store.save(self._habits)


__all__ = ["PALETTE", "HabitRegistry"]
