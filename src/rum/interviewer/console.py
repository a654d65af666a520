"""ConsoleInterviewer: prompts the user at the terminal via input()."""

from __future__ import annotations

from rum.model.question import Answer, AnswerValue, Question, QuestionType


class ConsoleInterviewer:
    """Interviewer that uses stdin/stdout for interactive prompts.

    Prints the question and its numbered options, then reads one line.
    End of input reads as an empty line. Undecodable input or a failing
    stream yields an INVALID answer so callers can ask again.
    """

    def ask(self, question: Question) -> Answer:
        if question.retry:
            print("Invalid input. Please try again.")
        elif question.text:
            print(f"\n{question.text}")

        if question.type is QuestionType.YES_NO:
            return self._ask_yes_no(question)
        if question.type is QuestionType.CHOICE and not question.retry:
            for opt in question.options:
                print(f"    ({opt.key}) {opt.label}")
        return self._ask_line(question)

    def _ask_yes_no(self, question: Question) -> Answer:
        raw = self._get_input(question.prompt)
        if raw is None:
            return Answer(value=AnswerValue.INVALID)
        raw = raw.strip().lower()
        if raw in ("y", "yes"):
            return Answer(value=AnswerValue.YES, text=raw)
        if raw == "" and question.default and question.default.lower() in ("y", "yes"):
            return Answer(value=AnswerValue.YES, text=raw)
        return Answer(value=AnswerValue.NO, text=raw)

    def _ask_line(self, question: Question) -> Answer:
        raw = self._get_input(question.prompt)
        if raw is None:
            return Answer(value=AnswerValue.INVALID)
        raw = raw.strip()
        return Answer(value=raw, text=raw)

    @staticmethod
    def _get_input(prompt: str) -> str | None:
        """Read one line. Returns None when the line cannot be read."""
        try:
            return input(prompt)
        except EOFError:
            return ""
        except (UnicodeDecodeError, OSError):
            return None
