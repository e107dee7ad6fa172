"""
Module: common.states

Purpose:
    Reference table of U.S. states, the District of Columbia and the
    territories: postal code, name and capital.

Key Functions:
    - get_state(): Look up a state by postal code
    - iter_states(): States in table order

Used By:
    - updates.variables: State capitals answer payload
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator


@dataclass(frozen=True)
class State:
    abbreviation: str
    name: str
    capital: str


_STATE_ROWS = (
    ("AL", "Alabama", "Montgomery"),
    ("AK", "Alaska", "Juneau"),
    ("AZ", "Arizona", "Phoenix"),
    ("AR", "Arkansas", "Little Rock"),
    ("CA", "California", "Sacramento"),
    ("CO", "Colorado", "Denver"),
    ("CT", "Connecticut", "Hartford"),
    ("DE", "Delaware", "Dover"),
    ("FL", "Florida", "Tallahassee"),
    ("GA", "Georgia", "Atlanta"),
    ("HI", "Hawaii", "Honolulu"),
    ("ID", "Idaho", "Boise"),
    ("IL", "Illinois", "Springfield"),
    ("IN", "Indiana", "Indianapolis"),
    ("IA", "Iowa", "Des Moines"),
    ("KS", "Kansas", "Topeka"),
    ("KY", "Kentucky", "Frankfort"),
    ("LA", "Louisiana", "Baton Rouge"),
    ("ME", "Maine", "Augusta"),
    ("MD", "Maryland", "Annapolis"),
    ("MA", "Massachusetts", "Boston"),
    ("MI", "Michigan", "Lansing"),
    ("MN", "Minnesota", "Saint Paul"),
    ("MS", "Mississippi", "Jackson"),
    ("MO", "Missouri", "Jefferson City"),
    ("MT", "Montana", "Helena"),
    ("NE", "Nebraska", "Lincoln"),
    ("NV", "Nevada", "Carson City"),
    ("NH", "New Hampshire", "Concord"),
    ("NJ", "New Jersey", "Trenton"),
    ("NM", "New Mexico", "Santa Fe"),
    ("NY", "New York", "Albany"),
    ("NC", "North Carolina", "Raleigh"),
    ("ND", "North Dakota", "Bismarck"),
    ("OH", "Ohio", "Columbus"),
    ("OK", "Oklahoma", "Oklahoma City"),
    ("OR", "Oregon", "Salem"),
    ("PA", "Pennsylvania", "Harrisburg"),
    ("RI", "Rhode Island", "Providence"),
    ("SC", "South Carolina", "Columbia"),
    ("SD", "South Dakota", "Pierre"),
    ("TN", "Tennessee", "Nashville"),
    ("TX", "Texas", "Austin"),
    ("UT", "Utah", "Salt Lake City"),
    ("VT", "Vermont", "Montpelier"),
    ("VA", "Virginia", "Richmond"),
    ("WA", "Washington", "Olympia"),
    ("WV", "West Virginia", "Charleston"),
    ("WI", "Wisconsin", "Madison"),
    ("WY", "Wyoming", "Cheyenne"),
    ("DC", "District of Columbia", "D.C. is not a state and does not have a capital"),
    ("AS", "American Samoa", "Pago Pago"),
    ("GU", "Guam", "Hagatna"),
    ("MP", "Northern Mariana Islands", "Saipan"),
    ("PR", "Puerto Rico", "San Juan"),
    ("VI", "U.S. Virgin Islands", "Charlotte Amalie"),
)

STATES_BY_ABBREVIATION: Dict[str, State] = {
    code: State(code, name, capital) for code, name, capital in _STATE_ROWS
}


def get_state(abbreviation: str) -> State:
    """
    Look up a state or territory by postal code.

    Raises:
        KeyError: If the code is unknown
    """
    return STATES_BY_ABBREVIATION[abbreviation.upper()]


def iter_states() -> Iterator[State]:
    """Yield states and territories in table order."""
    yield from STATES_BY_ABBREVIATION.values()
