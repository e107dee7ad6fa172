"""
Integration tests for the local-file pipeline.
"""

import json

import fitz
import pytest

from civics_toolkit.core.models import AnswerKind, Answers, UpdatePartial
from civics_toolkit.core.utils import load_questions_json
from civics_toolkit.parsing import pipeline
from civics_toolkit.parsing.config import CivicsConfig
from civics_toolkit.parsing.pipeline import (
    construct_questions,
    load_questions_text,
    load_update_partials,
    parse_civics_questions,
)
from civics_toolkit.updates import VARIABLE_QUESTIONS, VariableQuestionNotFoundError


UPDATES_HTML = """
<div class="accordion__panel">
  <p><strong>20. Who is one of your state's U.S. Senators now?*</strong></p>
  <ul><li>Answers will vary.</li></ul>
  <p><strong>28. What is the name of the President of the United States
    now?*</strong></p>
  <ul><li>Donald J. Trump</li><li>Donald Trump</li><li>Trump</li></ul>
  <p><strong>29. What is the name of the Vice President of the United States
    now?</strong></p>
  <ul><li>JD Vance</li><li>Vance</li></ul>
</div>
"""


@pytest.fixture
def config(tmp_path) -> CivicsConfig:
    return CivicsConfig(
        questions_text_file=tmp_path / "questions.txt",
        questions_pdf_file=tmp_path / "questions.pdf",
        questions_json_file=tmp_path / "out" / "questions.json",
        updates_html_file=tmp_path / "updates.html",
        updates_json_file=tmp_path / "out" / "updates.json",
    )


@pytest.fixture
def populated_config(config, sample_question_list) -> CivicsConfig:
    config.questions_text_file.write_text(sample_question_list, encoding="utf-8")
    config.updates_html_file.write_text(UPDATES_HTML, encoding="utf-8")
    return config


class TestLoadQuestionsText:
    """Tests for load_questions_text()."""

    def test_reads_text_file(self, populated_config, sample_question_list):
        assert load_questions_text(populated_config) == sample_question_list

    def test_missing_sources(self, config):
        with pytest.raises(FileNotFoundError):
            load_questions_text(config)

    def test_extracts_pdf_and_caches_text(self, config):
        doc = fitz.open()
        doc.new_page().insert_text((72, 72), "AMERICAN GOVERNMENT\nA: One\n1. First?\n. yes")
        doc.save(str(config.questions_pdf_file))
        doc.close()

        text = load_questions_text(config)

        assert "1. First?" in text
        assert config.questions_text_file.read_text(encoding="utf-8") == text


class TestParseCivicsQuestions:
    """Tests for parse_civics_questions()."""

    def test_writes_baseline_json(self, populated_config):
        questions = parse_civics_questions(populated_config)

        assert len(questions) == 10
        assert load_questions_json(populated_config.questions_json_file) == questions


class TestLoadUpdatePartials:
    """Tests for load_update_partials()."""

    def test_missing_page_means_no_updates(self, config):
        assert load_update_partials(config) == []
        assert not config.updates_json_file.exists()

    def test_extracts_allowed_questions_and_writes_json(self, populated_config):
        partials = load_update_partials(populated_config)

        assert [p.question_number for p in partials] == [28, 29]
        written = json.loads(populated_config.updates_json_file.read_text(encoding="utf-8"))
        assert written[1] == {
            "question": "What is the name of the Vice President of the United States now?",
            "questionNumber": 29,
            "answers": {"type": "text", "choices": ["JD Vance", "Vance"]},
        }


class TestConstructQuestions:
    """Tests for construct_questions()."""

    def test_full_build(self, populated_config):
        result = construct_questions(populated_config)
        by_number = {q.question_number: q for q in result.questions}

        # Updated answers replace the baseline ones
        assert by_number[29].answers.choices == ("JD Vance", "Vance")
        assert by_number[29].theme == "AMERICAN GOVERNMENT"
        # President question is not in the sample list
        assert result.skipped == ["What is the name of the President of the United States now?*"]
        # Capitals payload applied
        assert by_number[44].answers.type == AnswerKind.CAPITAL.value
        assert {"capital": "Albany", "state": "NY"} in by_number[44].answers.choices
        # Untouched questions keep their text payload
        assert by_number[1].answers == Answers.text(["the Constitution"])
        assert [q.question_number for q in result.questions] == [1, 2, 9, 17, 20, 29, 43, 44, 48, 64]

    def test_output_written(self, populated_config):
        result = construct_questions(populated_config)

        assert result.output_path == populated_config.questions_json_file
        assert load_questions_json(result.output_path) == result.questions

    def test_without_capitals(self, populated_config):
        result = construct_questions(populated_config, include_capitals=False)
        capital = next(q for q in result.questions if q.question_number == 44)
        assert capital.answers.is_text

    def test_variable_payloads_applied(self, populated_config):
        senators = Answers(
            type=AnswerKind.SENATOR.value,
            choices=({"senator": "Jane Doe", "state": "NY"},),
        )

        result = construct_questions(
            populated_config,
            variable_payloads={VARIABLE_QUESTIONS["STATE_SENATORS"]: senators},
        )

        senator_question = next(q for q in result.questions if q.question_number == 20)
        assert senator_question.answers == senators

    def test_missing_variable_question(self, populated_config):
        representatives = Answers(type=AnswerKind.REPRESENTATIVE.value, choices=())

        with pytest.raises(VariableQuestionNotFoundError):
            construct_questions(
                populated_config,
                variable_payloads={VARIABLE_QUESTIONS["STATE_REPRESENTATIVES"]: representatives},
            )

    def test_without_updates_page(self, config, sample_question_list):
        config.questions_text_file.write_text(sample_question_list, encoding="utf-8")

        result = construct_questions(config)

        assert result.skipped == []
        vice_president = next(q for q in result.questions if q.question_number == 29)
        assert vice_president.answers.choices == ("Kamala D. Harris", "Kamala Harris", "Harris")


class TestVariableQuestionUpdates:
    """Updates for variable questions only yield to a supplied payload."""

    @pytest.fixture
    def governor_update(self, monkeypatch):
        partial = UpdatePartial(
            question=VARIABLE_QUESTIONS["STATE_GOVERNORS"],
            answers=Answers.text(["Answers will vary. [D.C. does not have a Governor.]"]),
        )
        monkeypatch.setattr(pipeline, "load_update_partials", lambda config: [partial])
        return partial

    def test_update_kept_without_payload(self, populated_config, governor_update):
        result = construct_questions(populated_config)

        governor = next(q for q in result.questions if q.question_number == 43)
        assert governor.answers == governor_update.answers

    def test_payload_wins_over_update(self, populated_config, governor_update):
        governors = Answers(
            type=AnswerKind.GOVERNOR.value,
            choices=({"governor": "John Doe", "state": "NY"},),
        )

        result = construct_questions(
            populated_config,
            variable_payloads={VARIABLE_QUESTIONS["STATE_GOVERNORS"]: governors},
        )

        governor = next(q for q in result.questions if q.question_number == 43)
        assert governor.answers == governors
