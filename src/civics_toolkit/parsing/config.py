"""
Module: parsing.config

Purpose:
    Configuration dataclasses for the parser and the local-file pipeline.
    Provides immutable settings for marker cleaning and the data file
    locations the pipeline reads and writes.

Key Classes:
    - ParserConfig: Settings for text cleaning
    - CivicsConfig: Data file locations, overridable from the environment

Used By:
    - parsing.parse_questions_text: Uses ParserConfig for the site token
    - parsing.pipeline: Uses CivicsConfig for every input and output
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Mapping, Optional

from .text import DEFAULT_SITE_TOKEN


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for question list parsing.

    Attributes:
        site_token: Site suffix that ends every page marker
            (default "uscis.gov/citizenship").
    """
    site_token: str = DEFAULT_SITE_TOKEN


@dataclass(frozen=True)
class CivicsConfig:
    """
    Data file locations for the pipeline.

    Attributes:
        questions_text_file: Extracted question list text (cache of the PDF)
        questions_pdf_file: Published question list PDF
        questions_json_file: Output question set
        updates_html_file: Saved "check for test updates" page
        updates_json_file: Extracted update partials
        parser: Parser settings
    """
    questions_text_file: Path = Path("data/civics-questions-2025.txt")
    questions_pdf_file: Path = Path("data/civics-questions-2025.pdf")
    questions_json_file: Path = Path("data/civics-questions.json")
    updates_html_file: Path = Path("data/updated-questions.html")
    updates_json_file: Path = Path("data/updated-questions.json")
    parser: ParserConfig = field(default_factory=ParserConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> CivicsConfig:
        """
        Build a config, overriding each path from an environment variable.

        The variable name is the upper-cased field name, e.g.
        QUESTIONS_TEXT_FILE. SITE_TOKEN overrides the parser site token.

        Example:
            >>> CivicsConfig.from_env({"QUESTIONS_JSON_FILE": "out/q.json"}).questions_json_file
            PosixPath('out/q.json')
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            if f.name == "parser":
                continue
            value = environ.get(f.name.upper())
            if value:
                overrides[f.name] = Path(value)
        site_token = environ.get("SITE_TOKEN")
        if site_token:
            overrides["parser"] = ParserConfig(site_token=site_token)
        return cls(**overrides)
