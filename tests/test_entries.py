"""Tests for the completion toggle cycle."""

from __future__ import annotations

from datetime import timedelta

import pytest

from habitstreak.models import CompletionState
from habitstreak.services.entries import state_of, toggle_entry

from tests.conftest import TODAY, D, P, U


def test_cycle_order_is_unset_done_partial():
    entries = {}

    assert toggle_entry(entries, TODAY) is D
    assert entries == {TODAY: D}

    assert toggle_entry(entries, TODAY) is P
    assert entries == {TODAY: P}

    assert toggle_entry(entries, TODAY) is U
    assert entries == {}


@pytest.mark.parametrize("start", [U, D, P])
def test_three_toggles_return_to_start(start):
    entries = {} if start is U else {TODAY: start}

    for _ in range(3):
        toggle_entry(entries, TODAY)

    assert state_of(entries, TODAY) is start


def test_unset_is_stored_as_missing_key():
    entries = {TODAY: P}

    toggle_entry(entries, TODAY)

    assert TODAY not in entries
    assert CompletionState.UNSET not in entries.values()


def test_toggle_only_touches_given_day():
    other = TODAY - timedelta(days=3)
    entries = {other: D}

    toggle_entry(entries, TODAY)

    assert entries == {other: D, TODAY: D}


def test_future_date_is_a_plain_map_operation():
    future = TODAY + timedelta(days=30)
    entries = {}

    assert toggle_entry(entries, future) is D
    assert entries[future] is D


def test_successor_function_has_exactly_three_states():
    seen = set()
    state = CompletionState.UNSET
    for _ in range(6):
        seen.add(state)
        state = state.next()

    assert seen == set(CompletionState)
    assert len(CompletionState) == 3


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(True, D), (0.5, P), (None, U), (False, U), (1, U), (0, U), ("true", U)],
)
def test_stored_values_map_to_states(raw, expected):
    assert CompletionState.from_json(raw) is expected


def test_state_credit_and_stored_form():
    assert (D.credit, P.credit, U.credit) == (1.0, 0.5, 0.0)
    assert D.to_json() is True
    assert P.to_json() == 0.5
    assert U.to_json() is None
