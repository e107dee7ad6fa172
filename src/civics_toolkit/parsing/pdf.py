"""
Module: parsing.pdf

Purpose:
    Text extraction for the published question list PDF. Produces the
    plain text the parser consumes, with page markers already removed.

Key Functions:
    - extract_text_from_pdf(): Path or bytes -> cleaned text

Dependencies:
    - fitz (PyMuPDF): PDF text extraction

Used By:
    - parsing.pipeline.load_questions_text
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import fitz

from .text import DEFAULT_SITE_TOKEN, clean_page_markers

logger = logging.getLogger(__name__)


def extract_text_from_pdf(
    source: Union[Path, bytes],
    *,
    site_token: str = DEFAULT_SITE_TOKEN,
) -> str:
    """
    Extract and clean the text of every page of a PDF.

    Args:
        source: Path to a PDF file, or the PDF bytes
        site_token: Site suffix of page markers to strip

    Returns:
        Page texts joined in page order, page markers removed

    Raises:
        FileNotFoundError: If a path is given and doesn't exist
        ValueError: If the document has no pages

    Example:
        >>> text = extract_text_from_pdf(Path("data/civics-questions-2025.pdf"))
        >>> text.splitlines()[0]
        'AMERICAN GOVERNMENT'
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"PDF not found: {path}")
        doc = fitz.open(path)
        name = path.name
    else:
        doc = fitz.open(stream=source, filetype="pdf")
        name = "<bytes>"

    with doc:
        if doc.page_count == 0:
            raise ValueError("Document has no pages")
        raw_text = "".join(page.get_text() for page in doc)

    logger.info(f"Extracted {len(raw_text)} characters from {name}")
    return clean_page_markers(raw_text, site_token)
