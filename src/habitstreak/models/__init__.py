"""Model exports."""

from .habit import CompletionState, Habit
from .settings import AppSetting

__all__ = ["AppSetting", "CompletionState", "Habit"]
