from __future__ import annotations

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from kungfu import Error, LazyCoroResult, Ok, Result

from eventual import OutcomeState, lift as L, retry

from fakes import Failure, unwrap_error, unwrap_ok


def test_spawn_settles_from_result() -> None:
    async def run() -> None:
        async def ok() -> Result[int, Failure]:
            return Ok(1)

        async def bad() -> Result[int, Failure]:
            return Error(Failure("bad"))

        assert unwrap_ok(await L.spawn(ok)) == 1
        assert str(unwrap_error(await L.spawn(bad))) == "bad"

    asyncio.run(run())


def test_spawn_returns_pending_outcome_immediately() -> None:
    async def run() -> None:
        gate = asyncio.Event()

        async def wait_for_gate() -> Result[str, Failure]:
            await gate.wait()
            return Ok("open")

        outcome = L.spawn(wait_for_gate)
        assert outcome.state is OutcomeState.PENDING

        gate.set()
        assert unwrap_ok(await outcome) == "open"

    asyncio.run(run())


def test_spawn_captures_raised_exception() -> None:
    async def run() -> None:
        async def explode() -> Result[int, Failure]:
            raise ConnectionError("reset by peer")

        error = unwrap_error(await L.spawn(explode))
        assert isinstance(error, ConnectionError)

    asyncio.run(run())


def test_call_runs_function_on_every_invocation() -> None:
    async def run() -> None:
        calls: list[int] = []

        async def fetch(user_id: int) -> Result[str, Failure]:
            calls.append(user_id)
            return Ok(f"user:{user_id}")

        task = L.call(fetch, 42)
        assert calls == []

        assert unwrap_ok(await task()) == "user:42"
        assert unwrap_ok(await task()) == "user:42"
        assert calls == [42, 42]

    asyncio.run(run())


def test_lifted_function_returns_deferred_task() -> None:
    async def run() -> None:
        @L.lifted
        async def greet(name: str, *, punctuation: str = "!") -> Result[str, Failure]:
            return Ok(f"hello, {name}{punctuation}")

        task = greet("ada", punctuation="?")
        assert greet.__name__ == "greet"
        assert unwrap_ok(await task()) == "hello, ada?"

    asyncio.run(run())


def test_from_lazy_reruns_lazy_computation() -> None:
    async def run() -> None:
        runs: list[str] = []

        async def compute() -> Result[int, Failure]:
            runs.append("ran")
            return Ok(len(runs))

        task = L.from_lazy(LazyCoroResult(compute))

        assert unwrap_ok(await task()) == 1
        assert unwrap_ok(await task()) == 2

    asyncio.run(run())


def test_blocking_runs_on_supplied_executor() -> None:
    async def run() -> None:
        main_thread = threading.get_ident()

        def work(a: int, b: int, *, scale: int) -> tuple[int, int]:
            return (a + b) * scale, threading.get_ident()

        with ThreadPoolExecutor(max_workers=2) as pool:
            outcome = L.blocking(work, 1, 2, scale=10, executor=pool)()
            value, worker_thread = unwrap_ok(await outcome)

        assert value == 30
        assert worker_thread != main_thread

    asyncio.run(run())


def test_blocking_exception_becomes_failure() -> None:
    async def run() -> None:
        def parse() -> int:
            return int("not a number")

        error = unwrap_error(await L.blocking(parse)())
        assert isinstance(error, ValueError)

    asyncio.run(run())


def test_resolved_helpers() -> None:
    async def run() -> None:
        boom = Failure("x")

        assert unwrap_ok(await L.fulfilled(1)) == 1
        assert unwrap_error(await L.failed(boom)) is boom
        assert unwrap_ok(await L.from_result(Ok("r"))) == "r"
        assert unwrap_ok(await L.pure(2)()) == 2
        assert unwrap_error(await L.fail(boom)()) is boom

    asyncio.run(run())


def test_pure_hands_out_fresh_outcomes() -> None:
    async def run() -> None:
        task = L.pure("v")
        assert task() is not task()

    asyncio.run(run())


def test_down_helpers() -> None:
    async def run() -> None:
        assert unwrap_ok(await L.down.to_result(L.fulfilled(1))) == 1
        assert await L.down.unsafe(L.fulfilled(2)) == 2
        assert await L.down.or_else(L.failed(Failure("x")), default=0) == 0
        assert await L.down.or_else(L.fulfilled(3), default=0) == 3

        with pytest.raises(Exception):
            await L.down.unsafe(L.failed(Failure("boom")))

    asyncio.run(run())


@pytest.mark.parametrize(
    "helper",
    [L.spawn, L.call, L.lifted, L.from_lazy, L.blocking, L.to_result, L.unsafe, L.or_else, retry],
)
def test_public_helpers_document_usage(helper: object) -> None:
    doc = helper.__doc__ or ""
    assert "**When to use:**" in doc
    assert "**Grammar:**" in doc
