"""Base64 helpers for inline image options."""
from __future__ import annotations

import base64
import binascii

PNG_PREFIX = "data:image/png;base64,"


def is_png_data_uri(value: str) -> bool:
    return value.startswith(PNG_PREFIX)


def decode_png_data_uri(value: str) -> bytes:
    """Decode an inline PNG ``data:`` URI.

    Raises :class:`ValueError` if *value* is not one or its payload is not
    valid base64.
    """
    if not is_png_data_uri(value):
        raise ValueError(f"Not an inline PNG: {value[:40]!r}")
    try:
        return base64.b64decode(value[len(PNG_PREFIX):], validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 payload: {exc}") from exc


def is_file_path(value: str) -> bool:
    """Return ``True`` if *value* looks like a file-system path."""
    return value.startswith(("/", "./", "~/"))
