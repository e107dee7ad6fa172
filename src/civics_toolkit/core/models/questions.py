"""
Module: questions

Purpose:
    Provides the Question dataclass - the flat, externally visible record
    produced by the parser and consumed by the reconciler and JSON writer.
    Immutable: payload replacement returns a new instance.

Key Functions:
    - Question.with_answers(answers): Copy with only the payload replaced
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .answers.Answers

Used By:
    - parsing.structuring.tree_builder.flatten_themes
    - updates.reconciler
    - updates.variables
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .answers import Answers


@dataclass(frozen=True)
class Question:
    """
    Flattened question record (immutable).

    Attributes:
        theme: Top-level grouping like "AMERICAN GOVERNMENT"
        section: Subdivision like "Principles of American Democracy"
        question: Question text, continuation lines joined by one space
        question_number: Number as declared in the source (never renumbered)
        expected_answers: How many distinct answers a response must name
        answers: Answer payload

    Invariants:
        - theme and section are non-empty
        - expected_answers >= 1

    Example:
        >>> q = Question(
        ...     theme="AMERICAN GOVERNMENT",
        ...     section="Principles of American Democracy",
        ...     question="What is the supreme law of the land?",
        ...     question_number=1,
        ...     expected_answers=1,
        ...     answers=Answers.text(["the Constitution"]),
        ... )
        >>> q.to_dict()["questionNumber"]
        1
    """

    theme: str
    section: str
    question: str
    question_number: int
    expected_answers: int = 1
    answers: Answers = field(default_factory=lambda: Answers.text(()))

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.theme:
            raise ValueError("theme must be a non-empty string")
        if not self.section:
            raise ValueError("section must be a non-empty string")
        if self.question_number < 0:
            raise ValueError(f"question_number must be non-negative: {self.question_number}")
        if self.expected_answers < 1:
            raise ValueError(f"expected_answers must be >= 1: {self.expected_answers}")

    def with_answers(self, answers: Answers) -> Question:
        """Return a copy with the answer payload replaced and every other field kept."""
        return replace(self, answers=answers)

    def to_dict(self) -> dict:
        return {
            "theme": self.theme,
            "section": self.section,
            "question": self.question,
            "questionNumber": self.question_number,
            "expectedAnswers": self.expected_answers,
            "answers": self.answers.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        return cls(
            theme=data["theme"],
            section=data["section"],
            question=data["question"],
            question_number=data["questionNumber"],
            expected_answers=data.get("expectedAnswers", 1),
            answers=Answers.from_dict(data["answers"]),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.question_number}, {self.question!r}, "
            f"expected={self.expected_answers}, answers={self.answers.type}:{len(self.answers)})"
        )
