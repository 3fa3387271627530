"""Service module exports."""

from . import entries, export_csv, habit_store, navigation, registry, stats, streaks

__all__ = [
    "entries",
    "export_csv",
    "habit_store",
    "navigation",
    "registry",
    "stats",
    "streaks",
]
