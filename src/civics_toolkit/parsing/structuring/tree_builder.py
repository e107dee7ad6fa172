"""
Module: parsing.structuring.tree_builder

Purpose:
    Builds the Theme -> Section -> Question -> Answer tree from a list of
    stripped lines, then flattens it into Question records. Each level
    takes a start index into an immutable line tuple and returns what it
    parsed plus the index of the first line it did not consume.

Key Functions:
    - parse_themes(): Top level, returns themes and the unconsumed index
    - parse_sections() / parse_questions() / parse_answers(): Lower levels
    - flatten_themes(): Tree -> ordered flat Question list
    - build_question_tree(): Lines -> themes

Dependencies:
    - parsing.classification: Line kinds
    - parsing.answers: Expected answer detection
    - civics_toolkit.core.models: Question, Answers

Used By:
    - parsing.parse_questions_text
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from civics_toolkit.core.models import Answers, Question
from ..answers import detect_expected_answers
from ..classification import LineClassification, LineKind, classify_line


@dataclass(frozen=True)
class ParsedQuestion:
    """Question as declared in the source, before flattening."""
    question: str
    question_number: int
    answers: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedSection:
    """Named subdivision of a theme."""
    section: str
    questions: Tuple[ParsedQuestion, ...] = ()


@dataclass(frozen=True)
class ParsedTheme:
    """Top-level grouping. Repeated theme names stay separate entries."""
    theme: str
    sections: Tuple[ParsedSection, ...] = ()


class LineCursor:
    """
    Read-only view over classified lines.

    Lines are classified once up front; parse functions move through the
    document by index only.
    """

    def __init__(self, lines: Sequence[str]):
        self.lines: Tuple[str, ...] = tuple(lines)
        self.classifications: Tuple[LineClassification, ...] = tuple(
            classify_line(line) for line in self.lines
        )

    def __len__(self) -> int:
        return len(self.lines)

    def next_meaningful(self, index: int) -> Tuple[Optional[LineClassification], int]:
        """
        Skip EMPTY and OTHER lines starting at ``index``.

        Returns:
            (classification, index after it), or (None, len) at end of input
        """
        while index < len(self.lines):
            classification = self.classifications[index]
            if not classification.is_skippable:
                return classification, index + 1
            index += 1
        return None, index

    def continuation_at(self, index: int) -> Optional[str]:
        """Return the stripped line at ``index`` if it continues a question."""
        if index >= len(self.lines):
            return None
        if self.classifications[index].kind is not LineKind.OTHER:
            return None
        text = self.lines[index].strip()
        return text or None


def parse_themes(cursor: LineCursor, index: int = 0) -> Tuple[List[ParsedTheme], int]:
    """
    Parse consecutive themes starting at ``index``.

    Stops at the first meaningful line that is not a theme heading.

    Returns:
        (themes, index of first unconsumed line)
    """
    themes: List[ParsedTheme] = []
    while True:
        classification, after = cursor.next_meaningful(index)
        if classification is None or classification.kind is not LineKind.THEME:
            return themes, index
        sections, index = parse_sections(cursor, after)
        themes.append(ParsedTheme(classification.value, tuple(sections)))


def parse_sections(cursor: LineCursor, index: int) -> Tuple[List[ParsedSection], int]:
    """Parse consecutive sections; any non-section line hands control back."""
    sections: List[ParsedSection] = []
    while True:
        classification, after = cursor.next_meaningful(index)
        if classification is None or classification.kind is not LineKind.SECTION:
            return sections, index
        questions, index = parse_questions(cursor, after)
        sections.append(ParsedSection(classification.value, tuple(questions)))


def parse_questions(cursor: LineCursor, index: int) -> Tuple[List[ParsedQuestion], int]:
    """
    Parse consecutive questions with their answers.

    Lines directly after a question line that classify as OTHER are joined
    onto the question text with a single space (multi-line questions).
    """
    questions: List[ParsedQuestion] = []
    while True:
        classification, after = cursor.next_meaningful(index)
        if classification is None or classification.kind is not LineKind.QUESTION:
            return questions, index

        parts = [classification.value]
        index = after
        continuation = cursor.continuation_at(index)
        while continuation is not None:
            parts.append(continuation)
            index += 1
            continuation = cursor.continuation_at(index)

        answers, index = parse_answers(cursor, index)
        questions.append(ParsedQuestion(
            question=" ".join(parts),
            question_number=classification.question_number,
            answers=tuple(answers),
        ))


def parse_answers(cursor: LineCursor, index: int) -> Tuple[List[str], int]:
    """Collect answer lines until the first meaningful non-answer line."""
    answers: List[str] = []
    while True:
        classification, after = cursor.next_meaningful(index)
        if classification is None or classification.kind is not LineKind.ANSWER:
            return answers, index
        answers.append(classification.value)
        index = after


def build_question_tree(lines: Sequence[str]) -> List[ParsedTheme]:
    """
    Parse stripped lines into themes.

    Lines after the last theme that cannot be attached are ignored.

    Example:
        >>> themes = build_question_tree([
        ...     "AMERICAN GOVERNMENT",
        ...     "A: Principles of American Democracy",
        ...     "1. What is the supreme law of the land?",
        ...     ". the Constitution",
        ... ])
        >>> themes[0].sections[0].questions[0].answers
        ('the Constitution',)
    """
    themes, _ = parse_themes(LineCursor(lines))
    return themes


def flatten_themes(themes: Sequence[ParsedTheme]) -> List[Question]:
    """
    Flatten the tree into Question records in encounter order.

    Sections without questions contribute nothing. Every question gets its
    expected answer count and a text payload.
    """
    return [
        Question(
            theme=theme.theme,
            section=section.section,
            question=parsed.question,
            question_number=parsed.question_number,
            expected_answers=detect_expected_answers(parsed.question),
            answers=Answers.text(parsed.answers),
        )
        for theme in themes
        for section in theme.sections
        for parsed in section.questions
    ]
