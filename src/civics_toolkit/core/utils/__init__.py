"""
Utils Package

Serialization and file utilities.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    dumps_questions,
    load_questions_json,
    save_questions_json,
)
from .file_locking import locked_file, locked_write_text, locked_write_json

__all__ = [
    "serialize_question",
    "deserialize_question",
    "dumps_questions",
    "load_questions_json",
    "save_questions_json",
    "locked_file",
    "locked_write_text",
    "locked_write_json",
]
