"""Common reference data shared across the toolkit."""

from __future__ import annotations

from .states import State, STATES_BY_ABBREVIATION, get_state, iter_states

__all__ = [
    "State",
    "STATES_BY_ABBREVIATION",
    "get_state",
    "iter_states",
]
