"""First-run bootstrap: pick a Firefox profile and create an empty catalogue."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from rum.catalogue import CatalogueStore
from rum.errors import ConfigError, NotFoundError, ParseError
from rum.interviewer.base import Interviewer
from rum.model.question import Option, Question, QuestionType
from rum.model.style import Catalogue
from rum.prompts import parse_index

logger = logging.getLogger(__name__)


def parse_profiles(lines: Iterable[str]) -> list[str]:
    """List profile directories from ``profiles.ini``, default first.

    Every ``Path=`` entry is a profile; the one following ``Name=default``
    is the default.
    """
    profiles: list[str] = []
    default = False
    for line in lines:
        line = line.rstrip("\r\n")
        if line == "Name=default":
            default = True
        elif line.startswith("Path="):
            profile = line[len("Path="):]
            if default:
                default = False
                profiles.insert(0, profile)
            else:
                profiles.append(profile)
    return profiles


def select_profile(profiles: list[str], interviewer: Interviewer) -> str:
    """Ask which profile to use.

    Unlike the style prompts this does not loop: a non-numeric answer
    raises :class:`ParseError` and an unknown number :class:`NotFoundError`.
    """
    question = Question(
        text="Select a profile:",
        type=QuestionType.CHOICE,
        options=[Option(key=str(i), label=p) for i, p in enumerate(profiles)],
        default="0",
        prompt="[Default: 0] > ",
    )
    answer = interviewer.ask(question)
    raw = "" if answer.invalid else answer.text.strip()

    if raw and not (raw.isascii() and raw.isdigit()):
        raise ParseError(f"Invalid profile number: {raw!r}")

    index = parse_index(raw or "0", len(profiles) - 1)
    if index is None:
        raise NotFoundError("Profile number out of range.")
    return profiles[index]


def bootstrap(
    store: CatalogueStore,
    interviewer: Interviewer,
    profiles_ini: str | Path,
) -> Catalogue:
    """Create a new catalogue pointing at the chosen profile's chrome directory."""
    ini_path = Path(profiles_ini).expanduser()
    try:
        with ini_path.open(encoding="utf-8", errors="replace") as fh:
            profiles = parse_profiles(fh)
    except OSError as exc:
        raise ConfigError(f"Unable to read {ini_path}: {exc}", cause=exc) from exc

    profile = select_profile(profiles, interviewer)
    catalogue = Catalogue(chrome_path=str(ini_path.parent / profile / "chrome"))
    store.write(catalogue)
    logger.info("Created catalogue %s for profile %s", store.path, profile)
    return catalogue
