"""
Unit tests for the states reference table.
"""

import pytest

from civics_toolkit.common import STATES_BY_ABBREVIATION, get_state, iter_states


class TestStates:
    """Tests for get_state() and iter_states()."""

    def test_lookup_case_insensitive(self):
        assert get_state("ny").capital == "Albany"
        assert get_state("NY").name == "New York"

    def test_unknown_code(self):
        with pytest.raises(KeyError):
            get_state("ZZ")

    def test_territories_and_district_included(self):
        assert get_state("GU").capital == "Hagatna"
        assert get_state("DC").capital == "D.C. is not a state and does not have a capital"

    def test_iteration_order_and_size(self):
        codes = [s.abbreviation for s in iter_states()]
        assert codes[0] == "AL"
        assert len(codes) == len(STATES_BY_ABBREVIATION) == 56
