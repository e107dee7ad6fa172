"""
Module: parsing.classification

Purpose:
    Line classification for the civics question list. Every stripped line
    is one of theme heading, section heading, numbered question, bulleted
    answer, empty, or other (continuation text and stray prose).

Key Functions:
    - classify_line(): Classify a single line

Key Classes:
    - LineKind: Closed set of line kinds
    - LineClassification: Immutable classification result

Used By:
    - parsing.structuring.tree_builder: Drives the hierarchical parser
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Bullet markers for answer lines: ". " in older lists, "• " from 2025
ANSWER_MARKERS = (". ", "• ")

SECTION_PATTERN = re.compile(r"^([A-Z]):\s*(.+)$")
QUESTION_PATTERN = re.compile(r"^(\d+)\.\s+(.+)$")
_NUMBERED_PREFIX = re.compile(r"^\d+\.")


class LineKind(str, Enum):
    """Kind of a classified line."""
    THEME = "theme"
    SECTION = "section"
    QUESTION = "question"
    ANSWER = "answer"
    EMPTY = "empty"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LineClassification:
    """
    Classification of one line.

    Attributes:
        kind: The line kind.
        value: Theme/section name, question text or answer text. Empty for
            EMPTY and OTHER.
        question_number: Declared number, QUESTION only.
    """
    kind: LineKind
    value: str = ""
    question_number: Optional[int] = None

    @property
    def is_skippable(self) -> bool:
        """True for lines the parser discards while hunting for structure."""
        return self.kind in (LineKind.EMPTY, LineKind.OTHER)


EMPTY = LineClassification(LineKind.EMPTY)
OTHER = LineClassification(LineKind.OTHER)


def classify_line(line: str) -> LineClassification:
    """
    Classify a line of the question list.

    Precedence (first match wins):
    1. Empty - nothing left after stripping
    2. Answer - starts with ". " or "• " (before Theme, since "• 1870"
       has no lowercase letters and would otherwise read as a theme)
    3. Theme - line equals its upper-cased form, does not start with "."
       and is not "<digits>."
    4. Section - "A: Section Name"
    5. Question - "12. Question text"
    6. Other

    Never fails: anything unmatched is OTHER.

    Example:
        >>> classify_line("1. What is the supreme law of the land?")
        LineClassification(kind=<LineKind.QUESTION: 'question'>, value='What is the supreme law of the land?', question_number=1)
    """
    line = line.strip()
    if not line:
        return EMPTY

    for marker in ANSWER_MARKERS:
        if line.startswith(marker):
            return LineClassification(LineKind.ANSWER, line[len(marker):].strip())

    if line == line.upper() and not line.startswith(".") and not _NUMBERED_PREFIX.match(line):
        return LineClassification(LineKind.THEME, line)

    section = SECTION_PATTERN.match(line)
    if section:
        return LineClassification(LineKind.SECTION, section.group(2).strip())

    question = QUESTION_PATTERN.match(line)
    if question:
        return LineClassification(
            LineKind.QUESTION,
            question.group(2).strip(),
            question_number=int(question.group(1)),
        )

    return OTHER
