"""
Module: updates

Purpose:
    Models for the "answers changed" side of the data set: partial
    question records extracted from an update page, and the outcome of
    reconciling them against the baseline questions.

Dependencies:
    - dataclasses (std)
    - .answers.Answers
    - .questions.Question

Used By:
    - updates.extractor
    - updates.reconciler
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .answers import Answers
from .questions import Question


@dataclass(frozen=True)
class UpdatePartial:
    """
    Question fragment from an update document.

    Lacks theme and section. ``question`` and ``answers`` are required by
    the reconciler; they are Optional here so that a broken extractor can
    be detected rather than rejected at construction.
    """
    question: Optional[str]
    answers: Optional[Answers]
    question_number: Optional[int] = None

    def to_dict(self) -> dict:
        d: dict = {"question": self.question}
        if self.question_number is not None:
            d["questionNumber"] = self.question_number
        if self.answers is not None:
            d["answers"] = self.answers.to_dict()
        return d


@dataclass(frozen=True)
class ReconcileResult:
    """
    Result of reconciling update partials (immutable).

    Attributes:
        merged: Updated copies of matched baseline questions, in partial order.
        skipped: Question texts of partials with no baseline counterpart.
    """
    merged: Tuple[Question, ...] = ()
    skipped: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable at construction, store tuples
        object.__setattr__(self, "merged", tuple(self.merged))
        object.__setattr__(self, "skipped", tuple(self.skipped))
