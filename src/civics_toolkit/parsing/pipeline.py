"""
Module: parsing.pipeline

Purpose:
    Local-file pipeline that builds the civics question set. Reads the
    question list (text, or the PDF it was extracted from), parses it,
    reconciles the saved updates page, applies variable question payloads
    and writes the result as JSON. Performs no network access: inputs
    must already be on disk.

Key Functions:
    - load_questions_text(): Text file, else PDF -> text (cached)
    - parse_civics_questions(): Parse and write the baseline question set
    - load_update_partials(): Extract and write update partials
    - construct_questions(): Full build, returns PipelineResult

Key Classes:
    - PipelineResult: Container for pipeline output

Dependencies:
    - parsing: Question list parser
    - parsing.pdf: PDF text extraction (PyMuPDF)
    - updates: Extraction, reconciliation, variable payloads
    - core.utils: JSON persistence with file locking
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from civics_toolkit.core.models import Answers, Question, UpdatePartial
from civics_toolkit.core.utils import locked_write_json, locked_write_text, save_questions_json
from civics_toolkit.updates import (
    VARIABLE_QUESTIONS,
    UpdateContractError,
    apply_variable_answers,
    capital_answers,
    merge_questions,
    parse_updates_html,
    reconcile,
)
from . import parse_questions_text
from .config import CivicsConfig
from .pdf import extract_text_from_pdf

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """
    Result of building the question set.

    Attributes:
        questions: Final question set, in question list order.
        skipped: Update page questions with no counterpart in the list.
        output_path: Where the question set was written.
    """
    questions: List[Question]
    skipped: List[str] = field(default_factory=list)
    output_path: Optional[Path] = None


def _write_questions(questions: List[Question], path: Path) -> None:
    try:
        save_questions_json(questions, path)
    except OSError as e:
        logger.error(f"Failed to write questions to {path}: {e}")
        raise


def load_questions_text(config: CivicsConfig) -> str:
    """
    Load the question list text.

    Uses the text file when present. Otherwise extracts the text from the
    PDF and saves it to the text file for later runs.

    Raises:
        FileNotFoundError: If neither the text file nor the PDF exists
    """
    text_file = config.questions_text_file
    if text_file.exists():
        logger.info(f"Using local file {text_file}")
        return text_file.read_text(encoding="utf-8")

    pdf_file = config.questions_pdf_file
    if not pdf_file.exists():
        raise FileNotFoundError(
            f"Question list not found: {text_file} (or PDF {pdf_file})"
        )

    try:
        text = extract_text_from_pdf(pdf_file, site_token=config.parser.site_token)
    except (RuntimeError, ValueError) as e:
        logger.error(f"Failed to extract text from {pdf_file}: {e}")
        raise

    logger.info(f"Saving extracted text to {text_file}")
    locked_write_text(text_file, text)
    return text


def parse_civics_questions(config: CivicsConfig) -> List[Question]:
    """Parse the question list and write the baseline question set."""
    text = load_questions_text(config)
    questions = parse_questions_text(text, config=config.parser)
    if not questions:
        logger.warning(f"No questions parsed from {config.questions_text_file}")

    logger.info(f"Writing {len(questions)} questions JSON to {config.questions_json_file}")
    _write_questions(questions, config.questions_json_file)
    return questions


def load_update_partials(config: CivicsConfig) -> List[UpdatePartial]:
    """
    Extract update partials from the saved updates page.

    Returns an empty list when no updates page has been saved.
    """
    html_file = config.updates_html_file
    if not html_file.exists():
        logger.info(f"No updates page at {html_file}, skipping updates")
        return []

    logger.info(f"Using local updates HTML file {html_file}")
    html = html_file.read_text(encoding="utf-8")
    partials = parse_updates_html(html)

    logger.info(f"Writing {len(partials)} updated questions JSON to {config.updates_json_file}")
    locked_write_json(config.updates_json_file, [p.to_dict() for p in partials])
    return partials


def construct_questions(
    config: Optional[CivicsConfig] = None,
    *,
    variable_payloads: Optional[Mapping[str, Answers]] = None,
    include_capitals: bool = True,
) -> PipelineResult:
    """
    Build the full question set.

    Pipeline:
    1. Parse the question list (baseline)
    2. Reconcile the updates page against the baseline
    3. Drop updates for questions that get a payload, overlay the rest
    4. Apply variable question payloads (they take precedence)
    5. Write the question set

    Args:
        config: File locations (defaults to CivicsConfig.from_env())
        variable_payloads: Question text -> payload for senators,
            representatives and governors, from their own collaborators
        include_capitals: Apply the state capitals payload

    Returns:
        PipelineResult with the final questions and skipped update texts

    Raises:
        FileNotFoundError: If the question list is missing
        UpdateContractError: If the updates extractor produced a broken partial
        VariableQuestionNotFoundError: If a payload's question is missing
    """
    config = config or CivicsConfig.from_env()

    baseline = parse_civics_questions(config)
    try:
        result = reconcile(baseline, load_update_partials(config))
    except UpdateContractError as e:
        logger.error(f"Broken update partial from {config.updates_html_file}: {e}")
        raise

    payloads = {}
    if include_capitals:
        payloads[VARIABLE_QUESTIONS["STATE_CAPITALS"]] = capital_answers()
    payloads.update(variable_payloads or {})

    # Only questions that receive a payload drop their update
    updates = [q for q in result.merged if q.question not in payloads]

    questions = apply_variable_answers(merge_questions(baseline, updates), payloads)

    logger.info(f"Writing updated questions to {config.questions_json_file}")
    _write_questions(questions, config.questions_json_file)
    logger.info("Completed constructing questions")
    return PipelineResult(
        questions=questions,
        skipped=list(result.skipped),
        output_path=config.questions_json_file,
    )
