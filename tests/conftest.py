import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import civics_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from civics_toolkit.core.models import Answers, Question


SAMPLE_QUESTION_LIST = """\
AMERICAN GOVERNMENT

A: Principles of American Democracy

1. What is the supreme law of the land?
. the Constitution
2. What does the Constitution do?
. sets up the government
. defines the government
. protects basic rights of Americans
,1 of 19uscis.gov/citizenship
9. What are two rights in the Declaration of Independence?
. life
. liberty
. pursuit of happiness

B: System of Government

17. What are the two parts of the U.S. Congress?
. the Senate and House (of Representatives)
20. Who is one of your state’s U.S. senators now?
. Answers will vary.
29. What is the name of the Vice President of the United States now?
. Kamala D. Harris
. Kamala Harris
. Harris
43. Who is the governor of your state now? *
. Answers will vary.
44. What is the capital of your state?
. Answers will vary.

AMERICAN HISTORY

A: Colonial Period and Independence

48. There are four amendments to the Constitution about who can vote.
Describe one of them.
. Citizens eighteen (18) and older (can vote).
. You don’t have to pay (a poll tax) to vote.
64. Name one state that borders Canada. Name three.
• Maine
• New Hampshire
• Vermont
"""


@pytest.fixture
def sample_question_list() -> str:
    """Return a small question list in the published layout."""
    return SAMPLE_QUESTION_LIST


@pytest.fixture
def make_question():
    """Factory for Question records with sensible defaults."""
    def _make(question: str = "What is the supreme law of the land?", **overrides) -> Question:
        fields = {
            "theme": "AMERICAN GOVERNMENT",
            "section": "Principles of American Democracy",
            "question": question,
            "question_number": 1,
            "expected_answers": 1,
            "answers": Answers.text(["the Constitution"]),
        }
        fields.update(overrides)
        return Question(**fields)
    return _make
