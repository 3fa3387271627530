"""Chart helpers rendering recent completion as bar charts."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from .models.habit import Habit
from .services.stats import WEEK_DAYS, chart_series

EMPTY_BAR_COLOR = "#E5E5E5"


def habit_chart_figure(habit: Habit, today: date, window_days: int = WEEK_DAYS) -> Figure:
    """Build a bar chart of the last ``window_days`` days for ``habit``."""

    points = list(chart_series(habit.entries, today, window_days))
    labels = [point.label for point in points]
    values = [point.value for point in points]
    colors = [habit.color if value > 0 else EMPTY_BAR_COLOR for value in values]

    fig, ax = plt.subplots(figsize=(max(4, window_days * 0.6), 3))
    ax.bar(labels, values, color=colors)
    ax.set_ylim(0, 1)
    ax.set_yticks([0, 0.5, 1])
    ax.set_yticklabels(["", "½", "✓"])
    ax.set_title(habit.name, fontsize=12, fontweight="bold")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.tick_params(axis="x", labelsize=8)
    fig.tight_layout()
    return fig


def habit_chart_png(habit: Habit, today: date, output_path: Path, window_days: int = WEEK_DAYS) -> Path:
    """Render the habit chart to ``output_path`` and return it."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = habit_chart_figure(habit, today, window_days)
    try:
        fig.savefig(output_path, bbox_inches="tight", dpi=100)
    finally:
        plt.close(fig)
    return output_path


__all__ = ["habit_chart_figure", "habit_chart_png"]
