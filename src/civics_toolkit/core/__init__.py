"""
Civics Toolkit Core Package

Shared data models, schema validation and serialization used by the
parsing and updates subpackages.
"""

from .models import Answers, AnswerKind, Question, UpdatePartial, ReconcileResult

__all__ = [
    "Answers",
    "AnswerKind",
    "Question",
    "UpdatePartial",
    "ReconcileResult",
]
