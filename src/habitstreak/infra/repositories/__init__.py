"""Repository implementations."""

from .settings import SQLModelSettingsRepository

__all__ = ["SQLModelSettingsRepository"]
