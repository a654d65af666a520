"""Error hierarchy for rum."""
from __future__ import annotations

from collections.abc import Sequence


class RumError(Exception):
    """Base error for all rum errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NotFoundError(RumError):
    """A style id, style name, profile or remote resource does not exist."""


class ConfigError(RumError):
    """The catalogue file is missing, unreadable, unparsable or unwritable."""


class FileAccessError(RumError):
    """A target CSS file or local style file could not be read or written."""

    def __init__(
        self,
        message: str,
        *,
        path: str = "",
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.path = path


class NetworkError(RumError):
    """A remote fetch failed at the transport or HTTP level."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code


class ParseError(RumError):
    """A numeric id, selector or remote payload was malformed."""


class RecoveryError(RumError):
    """Rolling back a failed operation failed as well.

    ``cause`` is the error that triggered the rollback; ``failures`` holds
    every compensation error in the order they were raised. The message
    concatenates all of them so no failure masks another.
    """

    def __init__(
        self,
        cause: BaseException,
        failures: Sequence[BaseException],
    ) -> None:
        self.failures = tuple(failures)
        messages = [str(cause)] + [str(f) for f in self.failures]
        super().__init__("\n".join(messages), cause=cause)
