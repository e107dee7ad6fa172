"""
Schema Validation Utilities

Validates question JSON records before they are deserialized or after
they are written.

- `validate_question()` runs fast structural checks on one record
- `strict=True` additionally validates against question.schema.json
  with jsonschema
- Fail fast on any violation
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}

REQUIRED_FIELDS = ("theme", "section", "question", "questionNumber", "expectedAnswers", "answers")


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate one question record in its external JSON shape.

    Args:
        data: Question dictionary to validate
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Question must be an object, got {type(data).__name__}")

    missing = [f for f in REQUIRED_FIELDS if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    for key in ("theme", "section"):
        value = data[key]
        if not isinstance(value, str) or not value:
            raise ValidationError(
                f"Invalid {key}: {value!r} (must be a non-empty string)",
                path=key
            )

    if not isinstance(data["question"], str):
        raise ValidationError("question must be a string", path="question")

    number = data["questionNumber"]
    if not isinstance(number, int) or isinstance(number, bool) or number < 0:
        raise ValidationError(
            f"Invalid questionNumber: {number!r} (must be non-negative integer)",
            path="questionNumber"
        )

    expected = data["expectedAnswers"]
    if not isinstance(expected, int) or isinstance(expected, bool) or expected < 1:
        raise ValidationError(
            f"Invalid expectedAnswers: {expected!r} (must be integer >= 1)",
            path="expectedAnswers"
        )

    _validate_answers(data["answers"], "answers")

    if strict:
        schema = _load_schema("question")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e


def _validate_answers(data: Any, path: str) -> None:
    """Validate an answer payload."""
    if not isinstance(data, dict):
        raise ValidationError("answers must be a dict", path=path)

    kind = data.get("type", data.get("_type"))
    if not isinstance(kind, str) or not kind:
        raise ValidationError(
            f"Invalid answers type: {kind!r}",
            path=f"{path}.type"
        )

    choices = data.get("choices")
    if not isinstance(choices, list):
        raise ValidationError("choices must be a list", path=f"{path}.choices")

    if kind == "text":
        for i, choice in enumerate(choices):
            if not isinstance(choice, str):
                raise ValidationError(
                    f"Text choice must be a string: {choice!r}",
                    path=f"{path}.choices[{i}]"
                )


def validate_questions(records: Iterable[dict[str, Any]], *, strict: bool = False) -> None:
    """
    Validate a sequence of question records.

    Raises:
        ValidationError: For the first invalid record, with its index in path
    """
    for i, record in enumerate(records):
        try:
            validate_question(record, strict=strict)
        except ValidationError as e:
            location = f"[{i}].{e.path}" if e.path else f"[{i}]"
            raise ValidationError(str(e), path=location, errors=e.errors) from e
