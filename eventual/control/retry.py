"""
Retry combinators
=================

Bounded retry of a deferred task with a pluggable backoff between attempts.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._errors import AttemptsExhaustedError
from .._types import Deferred
from ..classify import Classifier, classify, is_fatal
from ..lift.call import spawn
from ..outcome import Outcome, invoke

logger = logging.getLogger(__name__)


# BackoffStrategy = (attempt_num, error) -> delay_seconds
type BackoffStrategy[E] = Callable[[int, E], float]


def _no_backoff[E](attempt: int, error: E) -> float:
    _ = (attempt, error)
    return 0.0


def _fixed_backoff[E](delay: float) -> BackoffStrategy[E]:
    """Same delay every retry."""
    def strategy(attempt: int, error: E) -> float:
        _ = (attempt, error)
        return delay
    return strategy


def _exponential_backoff[E](
    initial: float,
    multiplier: float = 2.0,
    max_delay: float = 60.0,
) -> BackoffStrategy[E]:
    """Delay grows: initial * multiplier^attempt (capped at max_delay)."""
    def strategy(attempt: int, error: E) -> float:
        _ = error
        delay = initial * (multiplier ** attempt)
        return min(delay, max_delay)
    return strategy


@dataclass(frozen=True, slots=True)
class RetryPolicy[E]:
    """
    Retry configuration: attempt budget, backoff, and which errors are fatal.

    `times` is the total number of attempts, not the number of retries.
    Zero is allowed and fails without running the task at all.
    """

    times: int
    backoff: BackoffStrategy[E] = _no_backoff
    classifier: Classifier = classify

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("RetryPolicy.times must be >= 0")

    @classmethod
    def immediate(
        cls,
        times: int,
        classifier: Classifier = classify,
    ) -> RetryPolicy[E]:
        """Retry right away, no delay between attempts."""
        return cls(times=times, classifier=classifier)

    @classmethod
    def fixed(
        cls,
        times: int,
        delay_seconds: float = 0.0,
        classifier: Classifier = classify,
    ) -> RetryPolicy[E]:
        """Same delay every retry. Simple and predictable."""
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        return cls(times=times, backoff=_fixed_backoff(delay_seconds), classifier=classifier)

    @classmethod
    def exponential(
        cls,
        times: int,
        initial: float = 0.1,
        multiplier: float = 2.0,
        max_delay: float = 60.0,
        classifier: Classifier = classify,
    ) -> RetryPolicy[E]:
        """Back off more aggressively with each failure."""
        if initial < 0.0:
            raise ValueError("initial must be >= 0")
        if multiplier < 1.0:
            raise ValueError("multiplier must be >= 1.0")
        if max_delay < initial:
            raise ValueError("max_delay must be >= initial")
        return cls(
            times=times,
            backoff=_exponential_backoff(initial, multiplier, max_delay),
            classifier=classifier,
        )


def retry[T, E](
    task: Deferred[T, E],
    *,
    policy: RetryPolicy[E],
) -> Outcome[T, E | AttemptsExhaustedError | Exception]:
    """
    Invoke `task` until it fulfills, at most `policy.times` times.

    - Success ends the attempts with the same value.
    - A recoverable failure starts the next attempt with a fresh outcome from
      the same task.
    - A fatal failure is returned at once, no further attempts.
    - Running out of attempts fails with AttemptsExhaustedError, even when
      only one attempt was allowed. The last task error is kept on its
      `last_error` attribute.

    **When to use:** For flaky work where a fresh attempt can succeed, such
    as network calls. The task must be a Deferred, so each attempt starts anew.

    Example:
        outcome = retry(L.call(fetch_user, 42), policy=RetryPolicy.fixed(3, 0.5))

    **Grammar:** `retry(task, policy=...)` reads as "retry task per policy"
    """

    async def run() -> Result[T, E | AttemptsExhaustedError]:
        last_error: E | None = None
        for attempt in range(policy.times):
            result = await invoke(task)
            match result:
                case Ok(_):
                    return result
                case Error(error):
                    if is_fatal(error, policy.classifier):
                        logger.warning(
                            "Attempt %d failed with a fatal error, not retrying: %r",
                            attempt + 1,
                            error,
                        )
                        return result
                    logger.debug("Attempt %d/%d failed: %r", attempt + 1, policy.times, error)
                    last_error = error
            if attempt + 1 < policy.times:
                delay = policy.backoff(attempt, last_error)  # type: ignore[arg-type]
                if delay > 0.0:
                    await asyncio.sleep(delay)

        if policy.times > 0:
            logger.warning("Giving up after %d attempts, last error: %r", policy.times, last_error)
        return Error(AttemptsExhaustedError(policy.times, last_error))

    return spawn(run)


__all__ = (
    "BackoffStrategy",
    "RetryPolicy",
    "retry",
)
