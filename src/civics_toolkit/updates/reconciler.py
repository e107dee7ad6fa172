"""
Module: updates.reconciler

Purpose:
    Merges update partials back into the baseline question set. A partial
    is matched to its baseline question by exact text first, then by
    normalized text (case, trailing asterisk and apostrophe style
    ignored). Only the answer payload of a matched question is replaced.

Key Functions:
    - reconcile(): Match partials and build updated questions
    - merge_questions(): Overlay replacements onto the baseline by text

Key Classes:
    - QuestionIndex: Exact and normalized lookup maps, built once
    - UpdateContractError: Partial missing required fields

Used By:
    - parsing.pipeline.construct_questions
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from civics_toolkit.core.models import Question, ReconcileResult, UpdatePartial
from civics_toolkit.parsing.text import normalize_for_matching

logger = logging.getLogger(__name__)


class UpdateContractError(ValueError):
    """
    Raised when an update partial lacks question text or answers.

    This means the extractor that produced the partial is broken; it is
    not a document change and must not be treated as a skip.
    """

    def __init__(self, message: str, partial: UpdatePartial):
        super().__init__(message)
        self.partial = partial


class QuestionIndex:
    """
    Two-tier lookup over baseline questions.

    Both maps are built once. When two baseline questions share a key the
    later one wins.
    """

    def __init__(self, questions: Iterable[Question]):
        self.exact: Dict[str, Question] = {}
        self.normalized: Dict[str, Question] = {}
        for question in questions:
            self.exact[question.question] = question
            self.normalized[normalize_for_matching(question.question)] = question

    def find(self, text: str) -> Optional[Question]:
        """Exact lookup, then normalized lookup; None if both miss."""
        match = self.exact.get(text)
        if match is None:
            match = self.normalized.get(normalize_for_matching(text))
        return match


def _check_partial(partial: UpdatePartial) -> None:
    if not partial.question:
        raise UpdateContractError("Partial question missing question text", partial)
    if partial.answers is None:
        raise UpdateContractError(
            f"Partial question missing answers for: {partial.question}", partial
        )


def reconcile(
    baseline: Sequence[Question],
    partials: Iterable[UpdatePartial],
) -> ReconcileResult:
    """
    Reconcile update partials against the baseline questions.

    Args:
        baseline: Current question set
        partials: Update partials (question text + answers)

    Returns:
        ReconcileResult where ``merged`` holds one updated copy per matched
        partial (partial order) and ``skipped`` the unmatched question texts

    Raises:
        UpdateContractError: If a partial lacks question text or answers

    Example:
        >>> result = reconcile(questions, [UpdatePartial("Who is the Chief Justice of the United States now?", Answers.text(["John Roberts"]))])
        >>> result.merged[0].answers.choices
        ('John Roberts',)
    """
    index = QuestionIndex(baseline)
    merged: List[Question] = []
    skipped: List[str] = []

    for partial in partials:
        _check_partial(partial)
        original = index.find(partial.question)
        if original is None:
            # Wording can change between revisions of the question list
            logger.info(f"Skipping update for question not found in baseline: {partial.question!r}")
            skipped.append(partial.question)
            continue
        merged.append(original.with_answers(partial.answers))

    logger.debug(f"Reconciled {len(merged)} questions, skipped {len(skipped)}")
    return ReconcileResult(merged=tuple(merged), skipped=tuple(skipped))


def merge_questions(
    baseline: Sequence[Question],
    replacements: Iterable[Question],
) -> List[Question]:
    """
    Overlay replacement answer payloads onto the baseline by question text.

    Only the payload is taken from a replacement; every baseline question
    keeps its own theme, section and number, so baseline questions that
    share a text each stay distinct. A later replacement for the same text
    wins. Replacements whose text is not in the baseline are ignored.
    """
    by_text = {q.question: q.answers for q in replacements}
    return [
        q.with_answers(by_text[q.question]) if q.question in by_text else q
        for q in baseline
    ]
