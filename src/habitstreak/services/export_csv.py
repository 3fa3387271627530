"""CSV export of every recorded habit entry."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable

from ..models.habit import CompletionState, Habit

HEADERS = ["Habit Name", "Date", "Status"]

STATUS_LABELS = {
    CompletionState.DONE: "Completed",
    CompletionState.PARTIAL: "Partial",
    CompletionState.UNSET: "Missed",
}


def _write_rows(fh, habits: Iterable[Habit]) -> None:
    writer = csv.writer(fh, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(HEADERS)
    for habit in habits:
        for day, state in habit.entries.items():
            writer.writerow([habit.name, day.isoformat(), STATUS_LABELS[state]])


def render_habits_csv(habits: Iterable[Habit]) -> str:
    """Return the export table as text, habits in order and entries in insertion order."""

    buffer = io.StringIO()
    _write_rows(buffer, habits)
    return buffer.getvalue()


def export_habits_csv(*, habits: Iterable[Habit], output_path: Path) -> Path:
    """Write the export table to ``output_path`` and return the path written."""

    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        _write_rows(fh, habits)

    return output_path


__all__ = ["HEADERS", "STATUS_LABELS", "export_habits_csv", "render_habits_csv"]
