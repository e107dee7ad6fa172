"""
Module: updates.variables

Purpose:
    Variable questions: questions whose answers depend on where the
    applicant lives (senators, representative, governor, capital). Their
    payloads hold per-state choices instead of plain text.

Key Functions:
    - capital_answers(): Capital payload from the states table
    - apply_variable_answers(): Replace payloads of variable questions

Used By:
    - parsing.pipeline.construct_questions
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence

from civics_toolkit.common.states import iter_states
from civics_toolkit.core.models import AnswerKind, Answers, Question

logger = logging.getLogger(__name__)


# Question texts exactly as they appear in the 2025 question list
VARIABLE_QUESTIONS: Dict[str, str] = {
    "STATE_SENATORS": "Who is one of your state’s U.S. senators now?",
    "STATE_REPRESENTATIVES": "Name your U.S. representative.",
    "STATE_GOVERNORS": "Who is the governor of your state now? *",
    "STATE_CAPITALS": "What is the capital of your state?",
}


class VariableQuestionNotFoundError(KeyError):
    """Raised when a variable question is missing from the question set."""


def capital_answers() -> Answers:
    """Build the capital payload: one {"capital", "state"} choice per state."""
    return Answers(
        type=AnswerKind.CAPITAL.value,
        choices=tuple(
            {"capital": state.capital, "state": state.abbreviation}
            for state in iter_states()
        ),
    )


def apply_variable_answers(
    questions: Sequence[Question],
    payloads: Mapping[str, Answers],
) -> List[Question]:
    """
    Replace the payload of each variable question.

    Args:
        questions: Question set
        payloads: Question text -> payload

    Returns:
        New list in the original order

    Raises:
        VariableQuestionNotFoundError: If a payload's question is not in the set
    """
    present = {q.question for q in questions}
    for text in payloads:
        if text not in present:
            raise VariableQuestionNotFoundError(f"Variable question not found: {text!r}")

    updated = []
    for question in questions:
        payload = payloads.get(question.question)
        if payload is not None:
            logger.debug(f"Applying {payload.type} answers to {question.question!r}")
            question = question.with_answers(payload)
        updated.append(question)
    return updated
