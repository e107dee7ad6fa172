"""
Unit tests for question record validation.
"""

import pytest

from civics_toolkit.core.schemas import ValidationError, validate_question, validate_questions


@pytest.fixture
def record(make_question):
    return make_question().to_dict()


class TestValidateQuestion:
    """Tests for validate_question()."""

    def test_valid_record_passes(self, record):
        validate_question(record)
        validate_question(record, strict=True)

    def test_missing_fields_listed(self, record):
        del record["answers"]
        del record["theme"]

        with pytest.raises(ValidationError) as exc_info:
            validate_question(record)

        assert "Missing field: answers" in exc_info.value.errors
        assert "Missing field: theme" in exc_info.value.errors

    def test_non_dict_rejected(self):
        with pytest.raises(ValidationError):
            validate_question(["not", "a", "dict"])

    def test_empty_section_rejected(self, record):
        record["section"] = ""
        with pytest.raises(ValidationError) as exc_info:
            validate_question(record)
        assert exc_info.value.path == "section"

    @pytest.mark.parametrize("number", [-1, "1", True, 1.5])
    def test_bad_question_number(self, record, number):
        record["questionNumber"] = number
        with pytest.raises(ValidationError) as exc_info:
            validate_question(record)
        assert exc_info.value.path == "questionNumber"

    def test_expected_answers_must_be_positive(self, record):
        record["expectedAnswers"] = 0
        with pytest.raises(ValidationError):
            validate_question(record)

    def test_text_choices_must_be_strings(self, record):
        record["answers"]["choices"] = ["ok", 3]
        with pytest.raises(ValidationError) as exc_info:
            validate_question(record)
        assert exc_info.value.path == "answers.choices[1]"

    def test_dict_choices_allowed_for_officeholder_payloads(self, record):
        record["answers"] = {"type": "capital", "choices": [{"capital": "Albany", "state": "NY"}]}
        validate_question(record, strict=True)

    def test_strict_rejects_unknown_keys(self, record):
        record["extra"] = "field"

        validate_question(record)
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_question(record, strict=True)


class TestValidateQuestions:
    """Tests for validate_questions()."""

    def test_error_path_includes_index(self, make_question):
        records = [make_question().to_dict(), make_question().to_dict()]
        records[1]["expectedAnswers"] = -3

        with pytest.raises(ValidationError) as exc_info:
            validate_questions(records)

        assert exc_info.value.path == "[1].expectedAnswers"


class TestLegacyTypeKey:
    """The legacy "_type" payload key is accepted in both modes."""

    def test_legacy_type_key_passes_strict(self, record):
        record["answers"] = {"_type": "text", "choices": ["the Constitution"]}

        validate_question(record)
        validate_question(record, strict=True)

    def test_missing_type_rejected_in_both_modes(self, record):
        record["answers"] = {"choices": ["the Constitution"]}

        with pytest.raises(ValidationError):
            validate_question(record)
        with pytest.raises(ValidationError):
            validate_question(record, strict=True)
