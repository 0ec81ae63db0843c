"""
Concurrent combinators
======================

Start tasks independently and pair their values by argument position.

Failure tie-break: the error of the earliest-supplied failing task wins. A
failure of a later task is reported once every earlier task has fulfilled,
so repeated runs report the same error no matter which task finished first.
"""

from __future__ import annotations

import typing

from .._types import Deferred
from ..outcome import Outcome, invoke, join


def concurrent[A, B, E](
    first: Deferred[A, E],
    second: Deferred[B, E],
) -> Outcome[tuple[A, B], E | Exception]:
    """
    Start both tasks now, fulfill with `(a, b)` if both succeed.

    Both tasks always run, even when the other one fails.
    """
    return invoke(first).pair(invoke(second))


def concurrent_all[T, E](*tasks: Deferred[T, E]) -> Outcome[tuple[T, ...], E | Exception]:
    """
    Start every task now, fulfill with all values in argument order.

    With no tasks, fulfills with an empty tuple.
    """
    outcomes = [invoke(task) for task in tasks]
    return typing.cast("Outcome[tuple[T, ...], E | Exception]", join(*outcomes))


__all__ = ("concurrent", "concurrent_all")
