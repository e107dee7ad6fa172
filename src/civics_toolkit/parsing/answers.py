"""
Module: parsing.answers

Purpose:
    Infers how many distinct answers a question expects from its wording
    ("Name two...", "What are three...").

Key Functions:
    - detect_expected_answers(): Expected answer count (default 1)

Used By:
    - parsing.structuring.tree_builder.flatten_themes

Note:
    The pattern lists below are corrections collected against real
    question wording. Treat them as data: extending them is fine,
    replacing them with a "smarter" general rule changes results on
    questions that are not covered by tests.
"""

from __future__ import annotations

import re
from typing import Tuple

# Questions asking for "one of" something expect one answer whatever
# number they mention. Checked first.
ASK_FOR_ONE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"describe one of them"),
    re.compile(r"name one of"),
    re.compile(r"what is one"),
    re.compile(r"give one"),
)

# Two-part wording whose answer is a single compound item
SINGLE_COMPOUND_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"what are the two parts of the u\.s\. congress"),
    re.compile(r"what are the two parts of congress"),
    re.compile(r"what are the two main political parties"),
    re.compile(r"what are the two major political parties"),
    re.compile(r"what are the two houses of congress"),
)

COUNTED_NOUNS = (
    "rights", "parts", "branches", "ways", "examples", "things", "reasons",
    "amendments", "types", "kinds", "names", "national", "main", "major",
    "important",
)

_NOUNS = "|".join(COUNTED_NOUNS)


def _count_patterns(word: str, digit: str, *extra: str) -> Tuple[re.Pattern, ...]:
    return (
        re.compile(rf"\b(?:{word}|{digit})\s+(?:{_NOUNS})\b"),
        re.compile(rf"^(?:name|what are|give|list)\s+{word}\b"),
        *(re.compile(p) for p in extra),
    )


# Evaluated in this order; "name three" anywhere covers "... Name three."
NUMBER_PATTERNS: Tuple[Tuple[int, Tuple[re.Pattern, ...]], ...] = (
    (3, _count_patterns("three", "3", r"\bname\s+three\b")),
    (2, _count_patterns("two", "2")),
    (4, _count_patterns("four", "4")),
    (5, _count_patterns("five", "5")),
)


def detect_expected_answers(question_text: str) -> int:
    """
    Detect the number of answers a question expects.

    Rules, first match wins:
    1. Ask-for-one wording ("name one of", "describe one of them") -> 1
    2. Single compound exceptions ("two parts of the U.S. Congress") -> 1
    3. Number word or digit before a counted noun, or a leading
       "name/what are/give/list <number>" -> that number (2-5)
    4. Otherwise -> 1

    Args:
        question_text: Question text in any case

    Returns:
        Expected answer count, always >= 1

    Example:
        >>> detect_expected_answers("What are two rights in the Declaration of Independence?")
        2
        >>> detect_expected_answers("What are the two parts of the U.S. Congress?")
        1
    """
    text = question_text.lower()

    if any(p.search(text) for p in ASK_FOR_ONE_PATTERNS):
        return 1

    if any(p.search(text) for p in SINGLE_COMPOUND_PATTERNS):
        return 1

    for count, patterns in NUMBER_PATTERNS:
        if any(p.search(text) for p in patterns):
            return count

    return 1
