"""Outcome handle

Single-assignment result cell for asynchronous work:
- Pending until its one producer writes it
- then exactly one of Fulfilled(value) / Failed(error), forever

Backed by an asyncio.Future holding a kungfu Result, so failures travel as
values and every continuation runs as a done-callback on the owning loop."""

from __future__ import annotations

import asyncio
import enum
import logging
import typing
from collections.abc import Callable, Generator

from kungfu import Error, Ok, Result

from ._errors import OutcomeAlreadyResolvedError, OutcomePendingError
from ._types import Callback, Deferred

logger = logging.getLogger(__name__)


class OutcomeState(enum.Enum):
    PENDING = "pending"
    FULFILLED = "fulfilled"
    FAILED = "failed"


class Outcome[T, E]:
    """Eventual value of type T, or an error of type E.

    Written by exactly one producer, observed by any number of continuations.
    Awaiting an outcome yields its Result; the wait is shielded, so cancelling
    the awaiting coroutine leaves the outcome untouched.

    An outcome is bound to an event loop when created, so it and every
    combinator built on it must be created while a loop is running unless
    an explicit `loop` is passed.
    """

    __slots__ = ("_future",)

    def __init__(self, *, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Create a pending outcome on `loop` (the running loop by default)."""
        if loop is None:
            loop = asyncio.get_running_loop()
        self._future: asyncio.Future[Result[T, E]] = loop.create_future()

    @staticmethod
    def fulfilled[V](
        value: V,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> Outcome[V, typing.Never]:
        """Already fulfilled outcome."""
        outcome: Outcome[V, typing.Never] = Outcome(loop=loop)
        outcome.fulfill(value)
        return outcome

    @staticmethod
    def failed[Err](
        error: Err,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> Outcome[typing.Never, Err]:
        """Already failed outcome."""
        outcome: Outcome[typing.Never, Err] = Outcome(loop=loop)
        outcome.fail(error)
        return outcome

    # Producer side

    def settle(self, result: Result[T, E], /) -> None:
        """
        Write the final Result. Anything but Ok/Error fails with TypeError.

        Safe to call from a worker thread: an off-loop write is handed to the
        owning loop with `call_soon_threadsafe`. A second write made that way
        raises OutcomeAlreadyResolvedError on the loop, not in the thread.
        """
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is not self.loop:
            self.loop.call_soon_threadsafe(self.settle, result)
            return
        if self._future.done():
            raise OutcomeAlreadyResolvedError(f"{self!r} is already resolved")
        match result:
            case Ok(_) | Error(_):
                self._future.set_result(result)
            case _:
                self._future.set_result(
                    Error(TypeError(f"expected Ok or Error, got {type(result).__name__}"))
                )

    def fulfill(self, value: T, /) -> None:
        self.settle(Ok(value))

    def fail(self, error: E, /) -> None:
        self.settle(Error(error))

    # Observer side

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._future.get_loop()

    @property
    def state(self) -> OutcomeState:
        if not self._future.done():
            return OutcomeState.PENDING
        match self._future.result():
            case Ok(_):
                return OutcomeState.FULFILLED
            case _:
                return OutcomeState.FAILED

    def done(self) -> bool:
        return self._future.done()

    def result(self) -> Result[T, E]:
        """Read the Result without waiting. Raises OutcomePendingError while pending."""
        if not self._future.done():
            raise OutcomePendingError(f"{self!r} is still pending")
        return self._future.result()

    def subscribe(self, callback: Callback[T, E], /) -> None:
        """
        Run `callback(result)` once resolved.

        Callbacks always run on the owning loop, never inline, even when the
        outcome is already resolved at registration time.
        """

        def on_done(future: asyncio.Future[Result[T, E]]) -> None:
            callback(future.result())

        self._future.add_done_callback(on_done)

    def on_success(self, callback: Callable[[T], None], /) -> None:
        def on_result(result: Result[T, E]) -> None:
            match result:
                case Ok(value):
                    callback(value)
                case Error(_):
                    pass

        self.subscribe(on_result)

    def on_failure(self, callback: Callable[[E], None], /) -> None:
        def on_result(result: Result[T, E]) -> None:
            match result:
                case Error(error):
                    callback(error)
                case Ok(_):
                    pass

        self.subscribe(on_result)

    def pair[U](self, other: Outcome[U, E], /) -> Outcome[tuple[T, U], E]:
        """Pair two outcomes. See `join` for the failure tie-break."""
        return typing.cast("Outcome[tuple[T, U], E]", join(self, other))

    def __await__(self) -> Generator[typing.Any, None, Result[T, E]]:
        return asyncio.shield(self._future).__await__()

    def __repr__(self) -> str:
        if not self._future.done():
            return "Outcome(<pending>)"
        return f"Outcome({self._future.result()!r})"


def join[E](*outcomes: Outcome[typing.Any, E]) -> Outcome[tuple[typing.Any, ...], E]:
    """
    Combine outcomes into one tuple outcome, ordered by argument position.

    Failure tie-break: the lowest-positioned failure wins. A failure is
    reported only once every outcome before it has fulfilled, so the result
    never depends on which outcome happened to resolve first.
    """
    if not outcomes:
        return Outcome.fulfilled(())

    joined: Outcome[tuple[typing.Any, ...], E] = Outcome(loop=outcomes[0].loop)

    def decide(_: Result[typing.Any, E]) -> None:
        if joined.done():
            return
        values: list[typing.Any] = []
        for outcome in outcomes:
            if not outcome.done():
                return
            match outcome.result():
                case Ok(value):
                    values.append(value)
                case Error(error):
                    joined.fail(error)
                    return
        joined.fulfill(tuple(values))

    for outcome in outcomes:
        outcome.subscribe(decide)
    return joined


def invoke[T, E](task: Deferred[T, E]) -> Outcome[T, E | Exception]:
    """
    Start a deferred task and return its outcome.

    Never raises for ordinary failures: an exception thrown while starting the
    task, or a return value that is not an Outcome, becomes a failed outcome.

    Needs a running event loop: called outside one, it raises RuntimeError
    from `asyncio.get_running_loop`, like every combinator that allocates an
    Outcome.
    """
    try:
        outcome = task()
    except Exception as exc:
        logger.debug("Deferred task %r raised while starting", task, exc_info=True)
        return Outcome.failed(exc)
    if not isinstance(outcome, Outcome):
        return Outcome.failed(
            TypeError(f"deferred task must return an Outcome, got {type(outcome).__name__}")
        )
    return outcome


__all__ = ("Outcome", "OutcomeState", "invoke", "join")
