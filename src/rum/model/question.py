"""Question model: types for interactive prompts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class QuestionType(Enum):
    """Kind of question presented to the user."""

    CHOICE = "CHOICE"
    FREEFORM = "FREEFORM"
    YES_NO = "YES_NO"


class AnswerValue(Enum):
    """Canonical answer values for structured question types."""

    YES = "YES"
    NO = "NO"
    INVALID = "INVALID"


@dataclass(frozen=True)
class Option:
    """A single numbered option of a choice question."""

    key: str
    label: str


@dataclass(frozen=True)
class Question:
    """A question posed to the user while resolving a style."""

    text: str
    type: QuestionType
    options: list[Option] = field(default_factory=list)
    default: str | None = None
    prompt: str = " > "
    retry: bool = False


@dataclass
class Answer:
    """The user's response to a Question."""

    value: AnswerValue | str | None = None
    text: str = ""

    @property
    def is_yes(self) -> bool:
        return self.value is AnswerValue.YES

    @property
    def is_no(self) -> bool:
        return self.value is AnswerValue.NO

    @property
    def invalid(self) -> bool:
        return self.value is AnswerValue.INVALID
