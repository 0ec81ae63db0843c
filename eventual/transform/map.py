"""Transform combinators

Map the eventual value (or error) of an outcome into a new outcome.
The source outcome is never re-run and never written."""

from __future__ import annotations

from collections.abc import Callable

from ..outcome import Outcome


def transform[T, U, E](
    outcome: Outcome[T, E],
    fn: Callable[[T], U],
) -> Outcome[U, E | Exception]:
    """
    Apply `fn` to the value once fulfilled.

    A failure passes through unchanged and `fn` is not called. If `fn`
    raises, the new outcome fails with that exception.

    Example:
        is_even = transform(count, lambda n: n % 2 == 0)
    """
    mapped: Outcome[U, E | Exception] = Outcome(loop=outcome.loop)

    def on_value(value: T) -> None:
        try:
            new_value = fn(value)
        except Exception as exc:
            mapped.fail(exc)
            return
        mapped.fulfill(new_value)

    outcome.on_success(on_value)
    outcome.on_failure(mapped.fail)
    return mapped


def transform_error[T, E, F](
    outcome: Outcome[T, E],
    fn: Callable[[E], F],
) -> Outcome[T, F | Exception]:
    """Apply `fn` to the error once failed. Values pass through unchanged."""
    mapped: Outcome[T, F | Exception] = Outcome(loop=outcome.loop)

    def on_error(error: E) -> None:
        try:
            new_error = fn(error)
        except Exception as exc:
            mapped.fail(exc)
            return
        mapped.fail(new_error)

    outcome.on_success(mapped.fulfill)
    outcome.on_failure(on_error)
    return mapped


__all__ = ("transform", "transform_error")
