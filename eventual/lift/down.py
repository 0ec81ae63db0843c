"""
Lowering outcomes into values.

Await an Outcome and get its Result, its value, or a default.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from ..outcome import Outcome


async def to_result[T, E](outcome: Outcome[T, E]) -> Result[T, E]:
    """
    Wait for the outcome and return its Result.

    **When to use:** Standard way to leave the Outcome world and get a Result.
    Same as `await outcome`, spelled out for pipelines of helpers.

    Example:
        from eventual import lift as L

        result = await L.down.to_result(L.fulfilled(User(id=42)))
        # result: Ok(User(id=42))

    **Grammar:** `await L.down.to_result(outcome)` reads as "wait down to result"
    """
    return await outcome


async def unsafe[T, E](outcome: Outcome[T, E]) -> T:
    """
    Wait and unwrap, raises on failure.

    **When to use:** When the computation is known to succeed, or when a
    failure should become an exception for the caller.

    Example:
        user = await L.down.unsafe(L.call(fetch_user, 42)())
        # User(id=42), or raises

    **Grammar:** `await L.down.unsafe(outcome)` reads as "wait down unsafe (may raise)"

    NOTE: Use only when failure should become an exception for the caller.
    """
    result = await outcome
    return result.unwrap()


async def or_else[T, E](outcome: Outcome[T, E], default: T) -> T:
    """
    Wait and return the value, or `default` on any failure.

    **When to use:** When a fallback value is enough and the error itself
    does not matter. Fatal errors are replaced too; use `recover` to keep them.

    Example:
        user = await L.down.or_else(L.call(fetch_user, 42)(), default=GUEST)
        # always a User

    **Grammar:** `await L.down.or_else(outcome, default=...)` reads as "wait down or else default"
    """
    result = await outcome
    match result:
        case Ok(v):
            return v
        case Error(_):
            return default


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
)
