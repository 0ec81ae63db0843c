"""
Pipeline combinators
====================

Ordered chain of asynchronous stages, each fed by the previous stage's value
plus any raw inputs bound to it.

Example (combine -> mix -> finalize):
    cake = pipeline(
        lambda: melt(butter, chocolate),
        stage(mix, eggs, sugar),
        bake,
    )
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import Deferred, Stage
from ..outcome import Outcome, invoke
from .sequential import then


def stage[T, R, E](
    fn: Callable[..., Outcome[R, E]],
    *args: typing.Any,
    **kwargs: typing.Any,
) -> Stage[T, R, E]:
    """Bind raw inputs to a stage. The previous value is passed first."""

    def run(previous: T) -> Outcome[R, E]:
        return fn(previous, *args, **kwargs)

    return run


def pipeline(
    first: Deferred[typing.Any, typing.Any],
    *stages: Stage[typing.Any, typing.Any, typing.Any],
) -> Outcome[typing.Any, typing.Any]:
    """
    Run `first`, then each stage in order on the previous value.

    Stage k+1 starts only after stage k fulfills. The first failure skips
    every remaining stage and becomes the pipeline's error as-is.
    """
    outcome = invoke(first)
    for next_stage in stages:
        outcome = then(outcome, next_stage)
    return outcome


__all__ = ("stage", "pipeline")
