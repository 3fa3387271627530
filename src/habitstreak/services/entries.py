"""Per-habit entry store: the date -> completion state map."""

from __future__ import annotations

from datetime import date
from typing import MutableMapping

from ..models.habit import CompletionState

Entries = MutableMapping[date, CompletionState]


def state_of(entries: Entries, day: date) -> CompletionState:
    """Return the state recorded for ``day``; absent means unset."""

    return entries.get(day, CompletionState.UNSET)


def toggle_entry(entries: Entries, day: date) -> CompletionState:
    """Advance ``day`` one step through the completion cycle and return the new state.

    This is the only way completion data changes. Unset is represented by
    removing the key, never by storing an explicit marker. Future dates are
    accepted here; refusing them is the caller's job.
    """

    new_state = state_of(entries, day).next()
    if new_state is CompletionState.UNSET:
        entries.pop(day, None)
    else:
        entries[day] = new_state
    return new_state


__all__ = ["Entries", "state_of", "toggle_entry"]
