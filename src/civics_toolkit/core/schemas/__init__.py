"""
Schemas Package

JSON schema definition and validation utilities for question records.
"""

from .validator import (
    validate_question,
    validate_questions,
    ValidationError,
)

__all__ = [
    "validate_question",
    "validate_questions",
    "ValidationError",
]
