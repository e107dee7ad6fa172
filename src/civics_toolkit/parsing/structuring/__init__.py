"""
Module: parsing.structuring

Purpose:
    Structuring subpackage for folding classified lines into the
    Theme -> Section -> Question -> Answer hierarchy and flattening it
    into Question records.

Key Modules:
    - tree_builder: Cursor-based hierarchical parser and flattening

Used By:
    - parsing.parse_questions_text
"""

from .tree_builder import (
    LineCursor,
    ParsedQuestion,
    ParsedSection,
    ParsedTheme,
    build_question_tree,
    flatten_themes,
    parse_answers,
    parse_questions,
    parse_sections,
    parse_themes,
)

__all__ = [
    "LineCursor",
    "ParsedQuestion",
    "ParsedSection",
    "ParsedTheme",
    "build_question_tree",
    "flatten_themes",
    "parse_answers",
    "parse_questions",
    "parse_sections",
    "parse_themes",
]
