"""
Module: answers

Purpose:
    Provides the Answers dataclass - the tagged answer payload attached to
    every Question. Plain text choices are the default shape; officeholder
    payloads (senators, representatives, governors, capitals) carry
    per-state dict choices and are produced outside the parser.

Key Functions:
    - Answers.text(choices): Plain text payload factory
    - Answers.to_dict() / Answers.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.questions.Question
    - parsing.structuring.tree_builder
    - updates.extractor
    - updates.variables
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class AnswerKind(str, Enum):
    """Known answer payload kinds."""
    TEXT = "text"                      # Plain text choices
    SENATOR = "senator"                # {"senator", "state"}
    REPRESENTATIVE = "representative"  # {"representative", "state", "district"}
    GOVERNOR = "governor"              # {"governor", "state"}
    CAPITAL = "capital"                # {"capital", "state"}

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Answers:
    """
    Tagged answer payload (immutable).

    Attributes:
        type: Payload kind, usually one of AnswerKind. Unknown kinds are
            carried through untouched.
        choices: Ordered choices. Strings for text payloads, dicts for
            officeholder payloads. Order is source order.

    Example:
        >>> a = Answers.text(["the Constitution"])
        >>> a.type
        'text'
        >>> a.choices
        ('the Constitution',)
    """

    type: str
    choices: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not self.type:
            raise ValueError("Answers type must be a non-empty string")
        if not isinstance(self.choices, tuple):
            # Accept any iterable at construction, store a tuple
            object.__setattr__(self, "choices", tuple(self.choices))

    @classmethod
    def text(cls, choices: Iterable[str]) -> Answers:
        """
        Create a plain text payload.

        Args:
            choices: Answer strings in source order

        Returns:
            Answers with type="text"
        """
        return cls(type=AnswerKind.TEXT.value, choices=tuple(choices))

    @property
    def is_text(self) -> bool:
        return self.type == AnswerKind.TEXT.value

    def to_dict(self) -> dict:
        """Serialize to the external JSON shape."""
        return {
            "type": self.type,
            "choices": [dict(c) if isinstance(c, dict) else c for c in self.choices],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Answers:
        """
        Deserialize from dictionary.

        Accepts the legacy "_type" key as well as "type".
        """
        kind = data.get("type", data.get("_type"))
        return cls(type=kind, choices=tuple(data.get("choices", [])))

    def __len__(self) -> int:
        return len(self.choices)
