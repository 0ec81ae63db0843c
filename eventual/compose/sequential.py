"""
Sequential combinators
======================

Run one task, and only after it succeeds start the next.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from .._types import Deferred
from ..outcome import Outcome, invoke
from ..transform.map import transform


def then[T, U, E, F](
    outcome: Outcome[T, E],
    fn: Callable[[T], Outcome[U, F]],
) -> Outcome[U, E | F | Exception]:
    """
    Feed the value into `fn` and follow the outcome it starts.

    `fn` runs only after `outcome` fulfills. A failure skips `fn` and is
    passed on unchanged. If `fn` raises, the result fails with that exception.
    """
    chained: Outcome[U, E | F | Exception] = Outcome(loop=outcome.loop)

    def on_value(value: T) -> None:
        invoke(partial(fn, value)).subscribe(chained.settle)

    outcome.on_success(on_value)
    outcome.on_failure(chained.fail)
    return chained


def sequential[A, B, E](
    first: Deferred[A, E],
    second: Deferred[B, E],
) -> Outcome[tuple[A, B], E | Exception]:
    """
    Run `first`, then `second`, pair their values.

    `second` is invoked only once `first` has fulfilled; if `first` fails,
    `second` never runs and the result fails with `first`'s error.
    Each task is invoked exactly once.

    Example:
        user_and_orders = sequential(L.call(create_user, form), L.call(load_orders))
    """

    def run_second(a: A) -> Outcome[tuple[A, B], E | Exception]:
        return transform(invoke(second), lambda b: (a, b))

    return then(invoke(first), run_second)


__all__ = ("then", "sequential")
