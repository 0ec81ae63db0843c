"""Recover combinators

Turn recoverable failures into values. Fatal failures, as decided by the
classifier, always pass through untouched."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from ..classify import Classifier, classify, is_fatal
from ..outcome import Outcome


def recover[T, E](
    outcome: Outcome[T, E],
    *,
    default: T,
    classifier: Classifier = classify,
) -> Outcome[T, E]:
    """
    Turn a recoverable failure into `default`.

    A fulfilled outcome keeps its value; a fatal failure keeps its error.

    Example:
        count = recover(fetch_count(), default=-1)
    """
    recovered: Outcome[T, E] = Outcome(loop=outcome.loop)

    def on_result(result: Result[T, E]) -> None:
        match result:
            case Ok(_):
                recovered.settle(result)
            case Error(error):
                try:
                    fatal = is_fatal(error, classifier)
                except Exception as exc:
                    recovered.fail(exc)
                    return
                if fatal:
                    recovered.settle(result)
                else:
                    recovered.fulfill(default)

    outcome.subscribe(on_result)
    return recovered


def recover_with[T, E](
    outcome: Outcome[T, E],
    *,
    handler: Callable[[E], T],
    classifier: Classifier = classify,
) -> Outcome[T, E | Exception]:
    """
    Turn a recoverable failure into a value computed from the error.

    If `handler` raises, the new outcome fails with that exception.
    """
    recovered: Outcome[T, E | Exception] = Outcome(loop=outcome.loop)

    def on_result(result: Result[T, E]) -> None:
        match result:
            case Ok(_):
                recovered.settle(result)
            case Error(error):
                try:
                    fatal = is_fatal(error, classifier)
                except Exception as exc:
                    recovered.fail(exc)
                    return
                if fatal:
                    recovered.settle(result)
                    return
                try:
                    value = handler(error)
                except Exception as exc:
                    recovered.fail(exc)
                    return
                recovered.fulfill(value)

    outcome.subscribe(on_result)
    return recovered


__all__ = (
    "recover",
    "recover_with",
)
