"""
Module: parsing

Purpose:
    Civics question list parser. Turns the raw text of the published
    question list into a flat, ordered list of Question records.

    raw text -> clean_page_markers -> split_lines -> classify_line
             -> build_question_tree -> flatten_themes

Key Functions:
    - parse_questions_text(): Main entry point

Used By:
    - parsing.pipeline.parse_civics_questions
"""

from __future__ import annotations

from typing import List, Optional

from civics_toolkit.core.models import Question
from .answers import detect_expected_answers
from .classification import LineClassification, LineKind, classify_line
from .config import CivicsConfig, ParserConfig
from .structuring import build_question_tree, flatten_themes
from .text import clean_page_markers, normalize_for_matching, split_lines


def parse_questions_text(
    text: str,
    *,
    config: Optional[ParserConfig] = None,
) -> List[Question]:
    """
    Parse a civics question list into flat Question records.

    Pure and deterministic: the same text always yields equal output.
    Malformed structure is never an error; text without theme, section
    and question markers yields an empty list.

    Args:
        text: Raw question list text
        config: Optional parser configuration

    Returns:
        Questions in source order

    Example:
        >>> qs = parse_questions_text(
        ...     "AMERICAN GOVERNMENT\\n"
        ...     "A: Principles of American Democracy\\n"
        ...     "1. What is the supreme law of the land?\\n"
        ...     ". the Constitution\\n"
        ... )
        >>> qs[0].answers.choices
        ('the Constitution',)
    """
    config = config or ParserConfig()
    cleaned = clean_page_markers(text, config.site_token)
    return flatten_themes(build_question_tree(split_lines(cleaned)))


__all__ = [
    "parse_questions_text",
    "detect_expected_answers",
    "classify_line",
    "LineClassification",
    "LineKind",
    "clean_page_markers",
    "normalize_for_matching",
    "split_lines",
    "CivicsConfig",
    "ParserConfig",
]
