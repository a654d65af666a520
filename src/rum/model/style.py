"""Style model: installed style records and the catalogue that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from rum.errors import NotFoundError

USER_CONTENT = "userContent.css"
USER_CHROME = "userChrome.css"


class OriginKind(StrEnum):
    """Where a style's CSS comes from."""

    LOCAL = "Local"
    REMOTE = "Remote"
    CATALOGUE = "CatalogueStyle"


@dataclass
class StyleRecord:
    """One installed style.

    ``css`` is the resolved body for the current write only; it is never
    persisted and is recomputed from ``uri`` and ``settings`` each time.
    """

    id: int
    name: str
    uri: str
    origin_kind: OriginKind
    target_path: str
    domain: str | None = None
    enabled: bool = True
    settings: dict[str, str] = field(default_factory=dict)
    css: str = field(default="", compare=False, repr=False)

    @property
    def is_chrome(self) -> bool:
        return Path(self.target_path).name == USER_CHROME


@dataclass
class Catalogue:
    """All installed styles plus the profile's chrome directory."""

    chrome_path: str
    styles: list[StyleRecord] = field(default_factory=list)

    # --- lookup ---------------------------------------------------------------

    def contains(self, style_id: int) -> bool:
        return any(style.id == style_id for style in self.styles)

    def get(self, style_id: int) -> StyleRecord:
        for style in self.styles:
            if style.id == style_id:
                return style
        raise NotFoundError(f"No style with id {style_id}")

    def find_id(self, token: str) -> int:
        """Resolve *token* to a style id.

        A token of plain ASCII digits matching an existing id wins; otherwise
        the first style whose name equals *token* exactly.
        """
        if token.isascii() and token.isdigit():
            digits = token.lstrip("0") or "0"
            for style in self.styles:
                if str(style.id) == digits:
                    return style.id

        for style in self.styles:
            if style.name == token:
                return style.id
        raise NotFoundError(f"Invalid style id or name: {token!r}")

    def next_id(self) -> int:
        """Return the smallest non-negative id not in use."""
        next_free = 0
        for style_id in sorted(style.id for style in self.styles):
            if style_id != next_free:
                return next_free
            next_free += 1
        return next_free

    # --- mutation -------------------------------------------------------------

    def remove(self, style_id: int) -> StyleRecord:
        """Delete the style with *style_id* and return it."""
        for index, style in enumerate(self.styles):
            if style.id == style_id:
                return self.styles.pop(index)
        raise NotFoundError(f"No style with id {style_id}")

    def toggle(self, style_id: int) -> bool:
        """Flip the enabled flag of a style in place and return the new value."""
        style = self.get(style_id)
        style.enabled = not style.enabled
        return style.enabled

    # --- paths ----------------------------------------------------------------

    def target_path(self, chrome: bool = False) -> str:
        filename = USER_CHROME if chrome else USER_CONTENT
        return str(Path(self.chrome_path) / filename)
