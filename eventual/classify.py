"""
Error classification.

Recovery and retry only ever intercept RECOVERABLE failures. What counts as
fatal is decided by a classifier function handed to those combinators, so a
caller can widen the fatal set without touching the combinators themselves.

Example:
    from eventual import RetryPolicy, fatal_on, retry

    policy = RetryPolicy.immediate(5, classifier=fatal_on(PermissionError))
    outcome = retry(fetch_profile, policy=policy)
"""

from __future__ import annotations

import asyncio
import enum
import typing
from collections.abc import Callable


class Severity(enum.Enum):
    FATAL = "fatal"
    RECOVERABLE = "recoverable"


type Classifier = Callable[[typing.Any], Severity]

# Interrupts, cancellation and resource exhaustion are never retried or recovered.
FATAL_TYPES: tuple[type[BaseException], ...] = (
    KeyboardInterrupt,
    SystemExit,
    GeneratorExit,
    asyncio.CancelledError,
    MemoryError,
)


def classify(error: typing.Any) -> Severity:
    """Default classifier. Plain error values are always recoverable."""
    if isinstance(error, FATAL_TYPES):
        return Severity.FATAL
    return Severity.RECOVERABLE


def fatal_on(*types: type, base: Classifier = classify) -> Classifier:
    """
    Build a classifier that also treats instances of `types` as fatal.

    Everything else is delegated to `base`.
    """

    def classifier(error: typing.Any) -> Severity:
        if isinstance(error, types):
            return Severity.FATAL
        return base(error)

    return classifier


def is_fatal(error: typing.Any, classifier: Classifier = classify) -> bool:
    return classifier(error) is Severity.FATAL


__all__ = (
    "FATAL_TYPES",
    "Classifier",
    "Severity",
    "classify",
    "fatal_on",
    "is_fatal",
)
