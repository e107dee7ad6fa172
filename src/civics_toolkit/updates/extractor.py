"""
Module: updates.extractor

Purpose:
    Extracts update partials from the saved "check for test updates"
    page. Each question on that page is a <p> inside an accordion panel,
    followed by a <ul> listing its current answers.

Key Functions:
    - parse_updates_html(): HTML -> list of UpdatePartial

Dependencies:
    - bs4 (BeautifulSoup): HTML parsing

Used By:
    - parsing.pipeline.load_update_partials
"""

from __future__ import annotations

import logging
import re
from typing import AbstractSet, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from civics_toolkit.core.models import Answers, UpdatePartial

logger = logging.getLogger(__name__)

QUESTION_SELECTOR = 'div[class="accordion__panel"] > p'

# Questions whose answers follow the current officeholders. Other
# questions on the update page are informational and ignored.
UPDATED_QUESTIONS: frozenset = frozenset({
    "What is the name of the President of the United States now?*",
    "What is the name of the Vice President of the United States now?",
    "How many justices are on the Supreme Court?",
    "Who is the Chief Justice of the United States now?",
    "What is the political party of the President now?",
    "What is the name of the Speaker of the House of Representatives now?",
    "Name two national U.S. holidays.",
})

_WHITESPACE = re.compile(r"\s+")
_NUMBER_SPLIT = re.compile(r"(?<=\d)\. ")
_LEADING_DIGITS = re.compile(r"\d+")


def cleanse(text: str) -> str:
    """Strip, drop newlines and collapse runs of whitespace to one space."""
    return _WHITESPACE.sub(" ", text.strip().replace("\n", ""))


def split_question(text: str) -> Optional[Tuple[Optional[int], str]]:
    """
    Split "28. Question text" into (28, "Question text").

    Returns None unless the text splits into exactly two pieces.
    """
    pieces = _NUMBER_SPLIT.split(cleanse(text))
    if len(pieces) != 2:
        return None
    head, question = pieces
    number = _LEADING_DIGITS.match(head)
    return (int(number.group()) if number else None), question


def _answers_after(paragraph: Tag) -> List[str]:
    answer_list = paragraph.find_next_sibling("ul")
    if answer_list is None:
        return []
    return [cleanse(li.get_text()) for li in answer_list.find_all("li")]


def parse_updates_html(
    html: str,
    *,
    allowed: Optional[AbstractSet[str]] = UPDATED_QUESTIONS,
) -> List[UpdatePartial]:
    """
    Parse the updates page into partial question records.

    Args:
        html: Page HTML
        allowed: Question texts to keep; None keeps every question found

    Returns:
        Partials with a text payload, in page order

    Example:
        >>> partials = parse_updates_html(html)
        >>> partials[0].question
        'What is the name of the President of the United States now?*'
        >>> partials[0].answers.choices
        ('Donald J. Trump', 'Donald Trump', 'Trump')
    """
    soup = BeautifulSoup(html, "html.parser")
    partials: List[UpdatePartial] = []

    for paragraph in soup.select(QUESTION_SELECTOR):
        split = split_question(paragraph.get_text())
        if split is None:
            continue
        number, question = split
        if allowed is not None and question not in allowed:
            logger.debug(f"Ignoring update page question: {question!r}")
            continue
        partials.append(UpdatePartial(
            question=question,
            answers=Answers.text(_answers_after(paragraph)),
            question_number=number,
        ))

    logger.info(f"Found {len(partials)} updated questions")
    return partials
