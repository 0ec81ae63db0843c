"""
Lifting plain values into outcomes.

Already-resolved outcomes, and deferred tasks that produce them.
"""

from __future__ import annotations

from typing import Never

from kungfu import Result

from .._types import Deferred
from ..outcome import Outcome


def fulfilled[T](value: T) -> Outcome[T, Never]:
    """
    Outcome that is already fulfilled with `value`.

    Example:
        from eventual import lift as L

        user = L.up.fulfilled(User(id=42))
        result = await user  # Ok(User(id=42))
    """
    return Outcome.fulfilled(value)


def failed[E](error: E) -> Outcome[Never, E]:
    """Outcome that is already failed with `error`. Dual of fulfilled()."""
    return Outcome.failed(error)


def from_result[T, E](result: Result[T, E]) -> Outcome[T, E]:
    """
    Outcome holding an already-computed Result.

    NOTE: Not lazy. For work that should start later, use call().
    """
    outcome: Outcome[T, E] = Outcome()
    outcome.settle(result)
    return outcome


def pure[T](value: T) -> Deferred[T, Never]:
    """
    Deferred task that always fulfills with `value`.

    Every invocation hands back a fresh outcome.
    """

    def task() -> Outcome[T, Never]:
        return Outcome.fulfilled(value)

    return task


def fail[E](error: E) -> Deferred[Never, E]:
    """Deferred task that always fails with `error`. Dual of pure()."""

    def task() -> Outcome[Never, E]:
        return Outcome.failed(error)

    return task


__all__ = (
    "fulfilled",
    "failed",
    "from_result",
    "pure",
    "fail",
)
