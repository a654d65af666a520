"""Prompt helpers shared by the settings resolver, the engine and bootstrap.

Every helper here re-asks on unreadable input instead of failing.
"""

from __future__ import annotations

from dataclasses import replace

from rum.interviewer.base import Interviewer
from rum.model.question import Answer, Option, Question, QuestionType

DOMAIN_HELP = "Please select a target domain:\nExample: 'domain(\"kernel.org\")'"


def read_text(interviewer: Interviewer, text: str, prompt: str = " > ") -> str:
    """Ask a free-form question until a readable line comes back."""
    question = Question(text=text, type=QuestionType.FREEFORM, prompt=prompt)
    answer = interviewer.ask(question)
    while answer.invalid:
        answer = interviewer.ask(replace(question, retry=True))
    return answer.text


def read_name(interviewer: Interviewer) -> str:
    return read_text(interviewer, "Please select a name for this style:")


def read_domain(interviewer: Interviewer) -> str | None:
    """Ask whether the style is limited to a domain, and which one."""
    question = Question(
        text="Do you want to add a domain?",
        type=QuestionType.YES_NO,
        default="n",
        prompt="[y/N] > ",
    )
    if not interviewer.ask(question).is_yes:
        return None
    return read_text(interviewer, DOMAIN_HELP)


def read_custom(interviewer: Interviewer) -> str:
    return read_text(interviewer, "", prompt="[custom] > ")


def read_choice(
    interviewer: Interviewer,
    text: str,
    labels: list[str],
    default: int,
    allow_custom: bool,
) -> int:
    """Ask for a numbered option and return its index.

    Empty input returns *default*. When *allow_custom* is set, the index
    ``len(labels)`` is accepted too and stands for a free-form value.
    """
    options = [Option(key=str(i), label=label) for i, label in enumerate(labels)]
    if allow_custom:
        options.append(Option(key=str(len(labels)), label="Custom"))
    question = Question(
        text=text,
        type=QuestionType.CHOICE,
        options=options,
        default=str(default),
        prompt=f"[Default {default}] > ",
    )

    highest = len(options) - 1
    answer = interviewer.ask(question)
    while True:
        index = _answer_index(answer, default, highest)
        if index is not None:
            return index
        answer = interviewer.ask(replace(question, retry=True))


def parse_index(raw: str, highest: int) -> int | None:
    """Parse an ASCII option number between 0 and *highest*.

    Returns None for anything else. A digit string with more digits than
    *highest* is rejected without converting it.
    """
    if not (raw.isascii() and raw.isdigit()):
        return None
    digits = raw.lstrip("0") or "0"
    if len(digits) > len(str(highest)):
        return None
    index = int(digits)
    return index if index <= highest else None


def _answer_index(answer: Answer, default: int, highest: int) -> int | None:
    if answer.invalid:
        return None
    raw = answer.text.strip()
    if not raw:
        return default
    return parse_index(raw, highest)
