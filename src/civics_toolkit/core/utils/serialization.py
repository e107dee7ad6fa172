"""
Serialization Utilities

JSON persistence for question sets.

- Records use the external camelCase shape (``questionNumber``,
  ``expectedAnswers``, ``answers: {type, choices}``)
- Records are validated before they become Question objects
- A question set is one pretty-printed JSON array, written under a lock
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from ..models.questions import Question
from ..schemas.validator import validate_question, ValidationError
from .file_locking import locked_write_text


# ─────────────────────────────────────────────────────────────────────────────
# Question records
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """Convert a Question to its JSON record."""
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
) -> Question:
    """
    Build a Question from a JSON record.

    Args:
        data: Record as loaded from JSON
        validate: Run the structural checks before construction

    Raises:
        ValidationError: If the record is malformed
        ValueError: If a field breaks a Question invariant
    """
    if validate:
        validate_question(data, strict=False)
    return Question.from_dict(data)


def dumps_questions(questions: Sequence[Question]) -> str:
    """Render questions as the JSON document written to disk."""
    return json.dumps(
        [serialize_question(q) for q in questions],
        indent=2,
        ensure_ascii=False,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Question set files
# ─────────────────────────────────────────────────────────────────────────────

def load_questions_json(path: Path, *, validate: bool = True) -> list[Question]:
    """
    Read a question set written by save_questions_json().

    Raises:
        FileNotFoundError: If ``path`` is missing
        ValidationError: If the document is not a JSON array of valid records
    """
    if not path.exists():
        raise FileNotFoundError(f"Question set not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", path=str(path), errors=[str(e)]) from e

    if not isinstance(data, list):
        raise ValidationError("Question set must be a JSON array", path=str(path))

    loaded = []
    for index, record in enumerate(data):
        try:
            loaded.append(deserialize_question(record, validate=validate))
        except (ValidationError, ValueError, KeyError) as e:
            raise ValidationError(
                f"Error parsing question {index}: {e}",
                path=str(path),
                errors=[str(e)]
            ) from e

    return loaded


def save_questions_json(questions: Sequence[Question], path: Path) -> None:
    """Write questions to ``path`` as a JSON array, replacing any previous set."""
    locked_write_text(path, dumps_questions(questions) + "\n")
