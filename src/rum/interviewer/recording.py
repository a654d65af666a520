"""RecordingInterviewer: keeps a transcript of every prompt answered."""

from __future__ import annotations

from dataclasses import dataclass

from rum.interviewer.base import Interviewer
from rum.model.question import Answer, Question


@dataclass(frozen=True)
class QAPair:
    question: Question
    answer: Answer

    @property
    def retried(self) -> bool:
        """True when this prompt was a repeat after unreadable input."""
        return self.question.retry


class RecordingInterviewer:
    """Forwards every question to *inner* and records the exchange.

    Used in tests to check which prompts an operation issued, and in what
    order, without caring how the answers were produced.
    """

    def __init__(self, inner: Interviewer) -> None:
        self._inner = inner
        self._pairs: list[QAPair] = []

    def ask(self, question: Question) -> Answer:
        answer = self._inner.ask(question)
        self._pairs.append(QAPair(question, answer))
        return answer

    def transcript(self) -> list[QAPair]:
        return list(self._pairs)

    def questions(self) -> list[Question]:
        return [pair.question for pair in self._pairs]

    def answers(self) -> list[str]:
        """Raw text of each answer, unreadable ones included as ``""``."""
        return [pair.answer.text for pair in self._pairs]

    @property
    def retries(self) -> int:
        return sum(1 for pair in self._pairs if pair.retried)

    def clear(self) -> None:
        self._pairs.clear()
