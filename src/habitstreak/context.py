"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .clock import Clock, SystemClock
from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelSettingsRepository
from .logging_config import get_logger
from .services.habit_store import HabitStore
from .services.registry import HabitRegistry

logger = get_logger(__name__)


@dataclass
class AppContext:
    """Wired-up configuration, storage and registry for one session."""

    config: BaseConfig
    engine: Any
    session_factory: Callable[..., Any]
    settings_repo: SQLModelSettingsRepository
    store: HabitStore
    registry: HabitRegistry
    clock: Clock

    def close(self) -> None:
        self.engine.dispose()


def create_app_context(
    config: Optional[BaseConfig] = None, *, clock: Optional[Clock] = None
) -> AppContext:
    """Create the engine, load the registry once and bring cached streaks up to date."""

    if config is None:
        config = BaseConfig()
    clock = clock or SystemClock()

    engine, session_factory = bootstrap_database(config)

    settings_repo = SQLModelSettingsRepository(session_factory)
    store = HabitStore(settings_repo, config.STORAGE_KEY, seed_defaults=config.SEED_DEFAULTS)
    registry = HabitRegistry(store, clock=clock)
    registry.refresh_streaks()

    logger.info(
        "Application context ready",
        extra={"habits": len(registry), "database_url": config.DATABASE_URL},
    )
    return AppContext(
        config=config,
        engine=engine,
        session_factory=session_factory,
        settings_repo=settings_repo,
        store=store,
        registry=registry,
        clock=clock,
    )


__all__ = ["AppContext", "create_app_context"]
