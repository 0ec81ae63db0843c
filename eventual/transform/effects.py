"""Side effects combinators

Effects run for observation only (logging, metrics, debugging)
and don't change the outcome's result."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from ..outcome import Outcome


def tap[T, E](
    outcome: Outcome[T, E],
    effect: Callable[[T], None],
) -> Outcome[T, E | Exception]:
    """Run `effect` on the value, pass the result through unchanged."""
    observed: Outcome[T, E | Exception] = Outcome(loop=outcome.loop)

    def on_result(result: Result[T, E]) -> None:
        match result:
            case Ok(value):
                try:
                    effect(value)
                except Exception as exc:
                    observed.fail(exc)
                    return
            case Error(_):
                pass
        observed.settle(result)

    outcome.subscribe(on_result)
    return observed


def tap_err[T, E](
    outcome: Outcome[T, E],
    effect: Callable[[E], None],
) -> Outcome[T, E | Exception]:
    """Run `effect` on the error, pass the result through unchanged."""
    observed: Outcome[T, E | Exception] = Outcome(loop=outcome.loop)

    def on_result(result: Result[T, E]) -> None:
        match result:
            case Error(error):
                try:
                    effect(error)
                except Exception as exc:
                    observed.fail(exc)
                    return
            case Ok(_):
                pass
        observed.settle(result)

    outcome.subscribe(on_result)
    return observed


__all__ = ("tap", "tap_err")
