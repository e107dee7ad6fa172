"""
Core Models Package

Immutable data models that serve as the single source of truth for the
parser, the reconciler and the JSON writer.

All models in this package are frozen dataclasses. A change to a
question (for example a new answer payload) produces a new instance.
"""

from .answers import Answers, AnswerKind
from .questions import Question
from .updates import UpdatePartial, ReconcileResult

__all__ = [
    "Answers",
    "AnswerKind",
    "Question",
    "UpdatePartial",
    "ReconcileResult",
]
