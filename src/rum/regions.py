"""Marker-delimited CSS regions inside userContent.css / userChrome.css.

A region is ``START_MARKER + body + END_MARKER`` with the style id filled in.
Lookup is a plain first-occurrence search; regions are never parsed for
balance, so a hand-edited file is only ever changed inside a well-ordered
start/end pair.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rum.errors import FileAccessError

logger = logging.getLogger(__name__)

START_MARKER = "\n/* RUM START {id} */\n"
END_MARKER = "\n/* RUM END {id} */\n"


def start_marker(style_id: int) -> str:
    return START_MARKER.format(id=style_id)


def end_marker(style_id: int) -> str:
    return END_MARKER.format(id=style_id)


def install(content: str, style_id: int, body: str) -> str:
    """Append a region for *style_id* to the end of *content*."""
    return content + start_marker(style_id) + body + end_marker(style_id)


def excise(content: str, style_id: int) -> str:
    """Remove the region for *style_id*.

    Returns *content* unchanged when either marker is missing or the first
    start marker does not come before the first end marker.
    """
    start_str = start_marker(style_id)
    end_str = end_marker(style_id)
    start = content.find(start_str)
    end = content.find(end_str)
    if start == -1 or end == -1 or start >= end:
        return content
    return content[:start] + content[end + len(end_str):]


def contains_region(content: str, style_id: int) -> bool:
    start = content.find(start_marker(style_id))
    end = content.find(end_marker(style_id))
    return start != -1 and end != -1 and start < end


def wrap_domain(css: str, domain: str | None) -> str:
    """Limit *css* to *domain* with a ``@-moz-document`` block."""
    if not domain:
        return css
    return f"@-moz-document {domain} {{\n{css}\n}}"


# ---------------------------------------------------------------------------
# Whole-file access
# ---------------------------------------------------------------------------


def read_target(path: str | Path) -> str | None:
    """Read a target file. Returns None if it does not exist."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(
            f"Unable to read {path}: {exc}", path=str(path), cause=exc
        ) from exc


def write_target(path: str | Path, content: str) -> None:
    """Overwrite a target file with *content*, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileAccessError(
            f"Unable to write {path}: {exc}", path=str(path), cause=exc
        ) from exc
    logger.debug("Wrote %d characters to %s", len(content), path)


def append_region(path: str | Path, style_id: int, body: str) -> None:
    """Append a region to a target file without rewriting what is there."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(install("", style_id, body))
    except OSError as exc:
        raise FileAccessError(
            f"Unable to write {path}: {exc}", path=str(path), cause=exc
        ) from exc
    logger.debug("Appended region %d to %s", style_id, path)


def restore_target(path: str | Path, content: str | None) -> None:
    """Put a target file back to a previously read state.

    ``None`` means the file did not exist, so it is removed again.
    """
    path = Path(path)
    if content is not None:
        write_target(path, content)
        return
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        raise FileAccessError(
            f"Unable to remove {path}: {exc}", path=str(path), cause=exc
        ) from exc
