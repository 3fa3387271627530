"""Serialization of the habit registry and its load/save lifecycle."""

from __future__ import annotations

import json
from datetime import date
from typing import Any, Iterable

from ..domain.repositories import KeyValueStore
from ..logging_config import get_logger
from ..models.habit import CompletionState, Habit

logger = get_logger(__name__)

DEFAULT_HABITS = (
    ("1", "Exercise", "#FF5733"),
    ("2", "Meditation", "#33A1FD"),
    ("3", "Reading", "#33FD92"),
)


class HabitStoreError(RuntimeError):
    """Stored registry payload could not be decoded."""


def habit_to_dict(habit: Habit) -> dict[str, Any]:
    return {
        "id": habit.id,
        "name": habit.name,
        "entries": {
            day.isoformat(): state.to_json()
            for day, state in habit.entries.items()
            if state is not CompletionState.UNSET
        },
        "streak": habit.streak,
        "bestStreak": habit.best_streak,
        "color": habit.color,
    }


def habit_from_dict(payload: dict[str, Any]) -> Habit:
    """Build a habit from its stored form; unrecognised entry values are dropped."""

    try:
        raw_entries = payload.get("entries") or {}
        entries: dict[date, CompletionState] = {}
        for key, value in raw_entries.items():
            state = CompletionState.from_json(value)
            if state is not CompletionState.UNSET:
                entries[date.fromisoformat(key)] = state
        streak = int(payload.get("streak") or 0)
        best = int(payload.get("bestStreak") or 0)
        return Habit(
            id=str(payload["id"]),
            name=str(payload["name"]),
            color=str(payload.get("color") or ""),
            entries=entries,
            streak=streak,
            best_streak=max(best, streak),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise HabitStoreError(f"Invalid habit record: {payload!r}") from exc


def dump_habits(habits: Iterable[Habit]) -> str:
    """Serialize habits (in order) to the stored JSON text."""

    return json.dumps([habit_to_dict(habit) for habit in habits])


def load_habits(raw: str) -> list[Habit]:
    """Parse stored JSON text back into habits."""

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise HabitStoreError("Stored habits are not valid JSON") from exc
    if not isinstance(payload, list):
        raise HabitStoreError("Stored habits must be a JSON array")
    return [habit_from_dict(item) for item in payload]


def default_habits() -> list[Habit]:
    """Starter habits offered on first launch."""

    return [Habit(id=habit_id, name=name, color=color) for habit_id, name, color in DEFAULT_HABITS]


class HabitStore:
    """Reads and writes the whole registry under a single key."""

    def __init__(self, kv: KeyValueStore, key: str = "habits", *, seed_defaults: bool = False):
        self.kv = kv
        self.key = key
        self.seed_defaults = seed_defaults

    def load(self) -> list[Habit]:
        raw = self.kv.get(self.key)
        if raw is None:
            habits = default_habits() if self.seed_defaults else []
            logger.info(
                "No stored habits found", extra={"key": self.key, "seeded": len(habits)}
            )
            return habits
        habits = load_habits(raw)
        logger.info("Loaded habits", extra={"key": self.key, "count": len(habits)})
        return habits

    def save(self, habits: Iterable[Habit]) -> None:
        habits = list(habits)
        self.kv.set(self.key, dump_habits(habits))
        logger.debug("Saved habits", extra={"key": self.key, "count": len(habits)})


__all__ = [
    "HabitStore",
    "HabitStoreError",
    "default_habits",
    "dump_habits",
    "habit_from_dict",
    "habit_to_dict",
    "load_habits",
]
