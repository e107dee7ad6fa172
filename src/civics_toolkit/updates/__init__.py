"""
Module: updates

Purpose:
    Update handling for the question set: extraction of partial records
    from the updates page, reconciliation against the baseline, and the
    per-state payloads of variable questions.
"""

from .extractor import UPDATED_QUESTIONS, parse_updates_html
from .reconciler import QuestionIndex, UpdateContractError, merge_questions, reconcile
from .variables import (
    VARIABLE_QUESTIONS,
    VariableQuestionNotFoundError,
    apply_variable_answers,
    capital_answers,
)

__all__ = [
    "UPDATED_QUESTIONS",
    "parse_updates_html",
    "QuestionIndex",
    "UpdateContractError",
    "merge_questions",
    "reconcile",
    "VARIABLE_QUESTIONS",
    "VariableQuestionNotFoundError",
    "apply_variable_answers",
    "capital_answers",
]
