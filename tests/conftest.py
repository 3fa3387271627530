"""Pytest configuration and shared fixtures for HabitStreak tests.

Fixtures give each test a fixed "today", an in-memory key-value store or an
isolated SQLite database, and factories for habits with prepared entries.
"""

from __future__ import annotations

import logging
import tempfile
from datetime import date, timedelta
from pathlib import Path
from random import Random

import pytest
from sqlmodel import Session, SQLModel, create_engine

from habitstreak.clock import FixedClock
from habitstreak.models import CompletionState, Habit
from habitstreak.services.habit_store import HabitStore
from habitstreak.services.registry import HabitRegistry

TODAY = date(2026, 10, 19)

D = CompletionState.DONE
P = CompletionState.PARTIAL
U = CompletionState.UNSET


def days_ago(n: int, today: date = TODAY) -> date:
    return today - timedelta(days=n)


class MemoryKeyValueStore:
    """Dict-backed key-value store that records every write."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str):
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
        self.writes.append((key, value))

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


# =============================================================================
# Clock / storage fixtures
# =============================================================================


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def habit_store(kv) -> HabitStore:
    return HabitStore(kv, "habits")


@pytest.fixture
def registry(habit_store, clock) -> HabitRegistry:
    return HabitRegistry(habit_store, clock=clock, rng=Random(7))


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by setup_logging so tests do not leak log files."""

    yield
    logger = logging.getLogger("habitstreak")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


# =============================================================================
# Database fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what repositories expect."""

    def factory():
        return Session(db_engine, expire_on_commit=False)

    return factory


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point configuration at a temporary data directory."""

    monkeypatch.setenv("HABITSTREAK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITSTREAK_DEV_MODE", "true")
    monkeypatch.delenv("HABITSTREAK_DATABASE_URL", raising=False)
    monkeypatch.delenv("HABITSTREAK_STORAGE_KEY", raising=False)
    monkeypatch.delenv("HABITSTREAK_SEED_DEFAULTS", raising=False)
    return tmp_path


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def habit_factory():
    """Factory for habits with entries given as ``{days_ago: state}``."""

    counter = iter(range(1, 10_000))

    def _create_habit(
        name: str = "Test Habit",
        pattern: dict[int, CompletionState] | None = None,
        color: str = "#FF5733",
        streak: int = 0,
        best_streak: int = 0,
    ) -> Habit:
        entries = {
            days_ago(offset): state
            for offset, state in (pattern or {}).items()
            if state is not CompletionState.UNSET
        }
        return Habit(
            id=str(next(counter)),
            name=name,
            color=color,
            entries=entries,
            streak=streak,
            best_streak=best_streak,
        )

    return _create_habit
