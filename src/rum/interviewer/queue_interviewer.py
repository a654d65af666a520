"""QueueInterviewer: answers prompts from a pre-filled queue of lines."""

from __future__ import annotations

import queue
from collections.abc import Iterable

from rum.model.question import Answer, AnswerValue, Question, QuestionType


class QueueInterviewer:
    """Interviewer that replays scripted input lines.

    Each ask() consumes one line. Lines may also be Answer objects, which
    lets callers script unreadable input. An exhausted queue behaves like
    end of input on a console: an empty line.
    """

    def __init__(self, lines: Iterable[str | Answer] = ()) -> None:
        self._lines: queue.Queue[str | Answer] = queue.Queue()
        for line in lines:
            self._lines.put(line)

    def ask(self, question: Question) -> Answer:
        try:
            line = self._lines.get_nowait()
        except queue.Empty:
            return Answer(value="", text="")
        if isinstance(line, Answer):
            return line
        if question.type is QuestionType.YES_NO:
            return _yes_no(line)
        text = line.strip()
        return Answer(value=text, text=text)

    def feed(self, line: str | Answer) -> None:
        """Append one more line of input."""
        self._lines.put(line)

    @property
    def remaining(self) -> int:
        return self._lines.qsize()


def _yes_no(line: str) -> Answer:
    raw = line.strip().lower()
    if raw in ("y", "yes"):
        return Answer(value=AnswerValue.YES, text=raw)
    return Answer(value=AnswerValue.NO, text=raw)
