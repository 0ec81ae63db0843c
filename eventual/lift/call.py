"""
Starting asynchronous work.

Functions and decorators that run coroutines (or blocking callables on an
executor) and expose their eventual Result as an Outcome.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Awaitable, Callable
from concurrent.futures import Executor
from functools import partial, wraps

from kungfu import LazyCoroResult, Ok, Result

from .._types import Deferred
from ..outcome import Outcome

logger = logging.getLogger(__name__)

# Strong references to running drivers; the loop only keeps weak ones.
_running: set[asyncio.Task[None]] = set()


def spawn[T, E](thunk: Callable[[], Awaitable[Result[T, E]]]) -> Outcome[T, E | Exception]:
    """
    Run an async thunk as a task on the running loop, return its outcome.

    The thunk's Result settles the outcome. An Exception raised by the thunk
    becomes the failure. Cancellation and interpreter signals fail the outcome
    too, then keep propagating into the runtime.

    **When to use:** When you hold a zero-arg async thunk and want it running
    now. For a function with arguments that should start later, prefer `call()`.

    Example:
        outcome = L.spawn(lambda: fetch_user(42))
        result = await outcome

    **Grammar:** `L.spawn(thunk)` reads as "spawn thunk"
    """
    outcome: Outcome[T, E | Exception] = Outcome()

    async def drive() -> None:
        try:
            result = await thunk()
        except Exception as exc:
            logger.debug("Spawned task %r raised", thunk, exc_info=True)
            outcome.fail(exc)
            return
        except BaseException as exc:
            outcome.fail(exc)  # type: ignore[arg-type]
            raise
        outcome.settle(result)

    task = asyncio.ensure_future(drive())
    _running.add(task)
    task.add_done_callback(_running.discard)
    return outcome


def call[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Deferred[T, E | Exception]:
    """
    Deferred task that calls `func(*args, **kwargs)` each time it is invoked.

    **When to use:** The preferred way to hand work to a combinator. Keep
    `func` a plain async function returning Result and bind its arguments at
    the call site; nothing runs until the combinator invokes the task.

    Example:
        from eventual import lift as L, sequential

        both = sequential(L.call(fetch_user, 42), L.call(fetch_orders, 42))

    **Grammar:** `L.call(func, *args)` reads as "call function with args"

    NOTE: No memoization. Invoking the task twice runs `func` twice.
    """

    def task() -> Outcome[T, E | Exception]:
        return spawn(lambda: func(*args, **kwargs))

    return task


def lifted[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
) -> Callable[P, Deferred[T, E | Exception]]:
    """
    Decorator: calling the function returns a Deferred task instead of a coroutine.

    **When to use:** For functions that are always handed to combinators.
    `call()` at the call site keeps more locality; `@lifted` saves the
    repetition for common utilities.

    Example:
        @L.lifted
        async def fetch_user(user_id: int) -> Result[User, APIError]:
            ...

        outcome = retry(fetch_user(42), policy=RetryPolicy.immediate(3))

    **Grammar:** `@L.lifted` reads as "lifted function"
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Deferred[T, E | Exception]:
        return call(func, *args, **kwargs)

    return wrapper


def from_lazy[T, E](interp: LazyCoroResult[T, E]) -> Deferred[T, E | Exception]:
    """
    Deferred task from a kungfu LazyCoroResult.

    Each invocation runs the lazy computation again.

    **When to use:** When code already built with kungfu combinators has to
    enter an Outcome combinator such as `retry` or `concurrent`.

    Example:
        task = L.from_lazy(LazyCoroResult(lambda: fetch_user(42)))
        outcome = retry(task, policy=RetryPolicy.immediate(3))

    **Grammar:** `L.from_lazy(lcr)` reads as "from lazy computation"
    """

    def task() -> Outcome[T, E | Exception]:
        return spawn(interp)

    return task


def blocking[T](
    func: Callable[..., T],
    *args: typing.Any,
    executor: Executor | None = None,
    **kwargs: typing.Any,
) -> Deferred[T, Exception]:
    """
    Deferred task that runs a synchronous callable on an executor.

    The return value fulfills the outcome, a raised exception fails it.
    `executor=None` uses the loop's default executor. The outcome is always
    written back on the loop thread.

    **When to use:** For CPU-bound or blocking I/O callables that must not
    stall the loop. Pass your own pool to bound how many run at once.

    Example:
        pool = ThreadPoolExecutor(max_workers=4)
        digest = L.blocking(hash_file, path, executor=pool)

    **Grammar:** `L.blocking(func, *args, executor=pool)` reads as "blocking call on pool"
    """

    async def run() -> Result[T, Exception]:
        loop = asyncio.get_running_loop()
        value = await loop.run_in_executor(executor, partial(func, *args, **kwargs))
        return Ok(value)

    def task() -> Outcome[T, Exception]:
        return typing.cast("Outcome[T, Exception]", spawn(run))

    return task


__all__ = (
    "spawn",
    "call",
    "lifted",
    "from_lazy",
    "blocking",
)
