"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "HabitStreak"
    DB_FILENAME = "habitstreak.db"
    DEFAULT_STORAGE_KEY = "habits"
    DEFAULT_EXPORT_FILENAME = "habit_tracker_export.csv"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("HABITSTREAK_DEV_MODE", default=True)
        self.STORAGE_KEY = os.getenv("HABITSTREAK_STORAGE_KEY", self.DEFAULT_STORAGE_KEY)
        self.SEED_DEFAULTS = _env_bool("HABITSTREAK_SEED_DEFAULTS", default=True)
        self.EXPORT_FILENAME = os.getenv(
            "HABITSTREAK_EXPORT_FILENAME", self.DEFAULT_EXPORT_FILENAME
        )
        self.DATABASE_URL = os.getenv("HABITSTREAK_DATABASE_URL", self._build_sqlite_url())
        if not self.STORAGE_KEY.strip():
            raise ValueError("HABITSTREAK_STORAGE_KEY must not be blank.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("HABITSTREAK_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        connect_args: dict[str, Any] = {"check_same_thread": False}
        return {"connect_args": connect_args}

    @property
    def export_path(self) -> Path:
        return self.DATA_DIR / self.EXPORT_FILENAME


class TestConfig(BaseConfig):
    """Isolated configuration for tests: in-memory database, no starter habits."""

    __test__ = False

    def __init__(self) -> None:
        super().__init__()
        self.DATABASE_URL = "sqlite://"
        self.SEED_DEFAULTS = False

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        from sqlalchemy.pool import StaticPool

        options = super().sqlalchemy_engine_options()
        # One shared connection, otherwise every session sees a fresh in-memory DB.
        options["poolclass"] = StaticPool
        return options


__all__ = ["BaseConfig", "TestConfig"]
