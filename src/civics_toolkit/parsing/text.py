"""
Module: parsing.text

Purpose:
    Text normalization for the civics parser. Removes page/footer markers
    left behind by PDF text extraction, splits documents into meaningful
    lines, and normalizes question text for identity comparison.

Key Functions:
    - clean_page_markers(): Strip "15 of 19uscis.gov/citizenship" markers
    - split_lines(): Split into stripped, non-empty lines
    - normalize_for_matching(): Case/punctuation-insensitive match key

Used By:
    - parsing.parse_questions_text
    - parsing.pdf.extract_text_from_pdf
    - updates.reconciler
"""

from __future__ import annotations

import re
from typing import List

DEFAULT_SITE_TOKEN = "uscis.gov/citizenship"

_LINE_BREAK = re.compile(r"\r?\n")
_TRAILING_ASTERISK = re.compile(r"\s*\*\s*$")
_CURLY_APOSTROPHES = re.compile("[\u2018\u2019]")


def _marker_pattern(site_token: str) -> re.Pattern:
    # Optional leading comma covers markers glued inline to the previous answer
    return re.compile(r",?\d+\s+of\s+\d+" + re.escape(site_token))


def clean_page_markers(text: str, site_token: str = DEFAULT_SITE_TOKEN) -> str:
    """
    Remove page markers like ",15 of 19uscis.gov/citizenship".

    Markers are removed wherever they appear, inline or on their own line.
    Everything else, including whitespace inside surviving lines, is left
    untouched. Removal repeats until nothing changes, so
    ``clean_page_markers(clean_page_markers(x)) == clean_page_markers(x)``.

    Args:
        text: Raw extracted text
        site_token: Site suffix that ends every marker

    Returns:
        Cleaned text (unchanged if no markers are present)

    Example:
        >>> clean_page_markers(". the Constitution,3 of 19uscis.gov/citizenship")
        '. the Constitution'
    """
    pattern = _marker_pattern(site_token)
    cleaned = pattern.sub("", text)
    while cleaned != text:
        text = cleaned
        cleaned = pattern.sub("", text)
    return cleaned


def split_lines(text: str) -> List[str]:
    """Split on line breaks, strip each line and drop the blank ones."""
    return [line.strip() for line in _LINE_BREAK.split(text) if line.strip()]


def normalize_for_matching(text: str) -> str:
    """
    Normalize question text into a lookup key.

    Drops a trailing asterisk (and the whitespace around it), maps curly
    apostrophes to a straight one, trims and lower-cases.

    Example:
        >>> normalize_for_matching("Who is one of your state’s U.S. Senators now? *")
        "who is one of your state's u.s. senators now?"
    """
    text = _TRAILING_ASTERISK.sub("", text)
    text = _CURLY_APOSTROPHES.sub("'", text)
    return text.strip().lower()
