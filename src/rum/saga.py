"""Saga: ordered steps with compensating actions across independent stores.

The catalogue file and a target CSS file cannot be written atomically
together. Each lifecycle operation runs its writes as saga steps; when a step
fails, the compensations of the steps already done run in reverse order.
This is best-effort rollback, not a transaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from rum.errors import RecoveryError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Step:
    """A completed step and the action that undoes it."""

    name: str
    compensation: Callable[[], None]


class Saga:
    """Runs steps and rolls completed ones back when a later step fails.

    A step whose action overwrites a store in place may leave it half
    written when it fails; pass ``compensate_on_failure=True`` so its own
    compensation runs too.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._completed: list[Step] = []

    def step(
        self,
        name: str,
        action: Callable[[], T],
        compensation: Callable[[], None] | None = None,
        *,
        compensate_on_failure: bool = False,
    ) -> T:
        """Run *action*; on failure roll back and re-raise."""
        logger.debug("%s: %s", self.name, name)
        try:
            result = action()
        except Exception as exc:
            pending = list(self._completed)
            if compensation is not None and compensate_on_failure:
                pending.append(Step(name, compensation))
            self._rollback(exc, pending)
            raise
        if compensation is not None:
            self._completed.append(Step(name, compensation))
        return result

    def _rollback(self, error: Exception, steps: list[Step]) -> None:
        """Run compensations newest first.

        Returns normally if every compensation succeeded so the caller
        re-raises *error*; raises :class:`RecoveryError` carrying *error* and
        each compensation failure otherwise.
        """
        if not steps:
            return
        logger.warning("%s failed: %s", self.name, error)
        logger.warning("Attempting to recover")

        failures: list[Exception] = []
        for step in reversed(steps):
            try:
                step.compensation()
            except Exception as exc:
                logger.error("Unable to undo %r: %s", step.name, exc)
                failures.append(exc)
            else:
                logger.info("Undid %r", step.name)
        self._completed.clear()

        if failures:
            raise RecoveryError(error, failures) from error
        logger.warning("Successfully recovered from failed %s", self.name)
