from __future__ import annotations

import asyncio

from eventual import Outcome, OutcomeState, tap, tap_err, transform, transform_error

from fakes import Failure, failing, succeeding, unwrap_error, unwrap_ok


def test_transform_maps_value() -> None:
    async def run() -> None:
        is_even = transform(succeeding(4)(), lambda n: n % 2 == 0)
        assert unwrap_ok(await is_even) is True

    asyncio.run(run())


def test_transform_identity_keeps_both_outcomes() -> None:
    async def run() -> None:
        boom = Failure("boom")

        assert unwrap_ok(await transform(succeeding("v")(), lambda x: x)) == "v"
        assert unwrap_error(await transform(failing(boom)(), lambda x: x)) is boom

    asyncio.run(run())


def test_transform_never_applies_to_failure() -> None:
    async def run() -> None:
        applied: list[int] = []

        def record(value: int) -> int:
            applied.append(value)
            return value

        await transform(failing(Failure("boom"))(), record)
        assert applied == []

    asyncio.run(run())


def test_transform_does_not_rerun_source() -> None:
    async def run() -> None:
        task = succeeding(1)
        source = task()
        first = transform(source, lambda v: v + 1)
        second = transform(source, lambda v: v * 10)

        assert unwrap_ok(await first) == 2
        assert unwrap_ok(await second) == 10
        assert task.calls == 1
        assert source.state is OutcomeState.FULFILLED

    asyncio.run(run())


def test_transform_raising_function_fails_result() -> None:
    async def run() -> None:
        def explode(_: int) -> int:
            raise ZeroDivisionError("division by zero")

        error = unwrap_error(await transform(succeeding(1)(), explode))
        assert isinstance(error, ZeroDivisionError)

    asyncio.run(run())


def test_transform_error_maps_failure_only() -> None:
    async def run() -> None:
        wrapped = transform_error(failing(Failure("raw"))(), lambda e: Failure(f"wrapped: {e}"))
        assert str(unwrap_error(await wrapped)) == "wrapped: raw"

        untouched = transform_error(succeeding(9)(), lambda e: Failure("unused"))
        assert unwrap_ok(await untouched) == 9

    asyncio.run(run())


def test_tap_observes_value_without_changing_it() -> None:
    async def run() -> None:
        seen: list[str] = []
        observed = tap(succeeding("user")(), seen.append)

        assert unwrap_ok(await observed) == "user"
        assert seen == ["user"]

    asyncio.run(run())


def test_tap_err_observes_error_only() -> None:
    async def run() -> None:
        boom = Failure("boom")
        errors: list[Failure] = []

        assert unwrap_error(await tap_err(failing(boom)(), errors.append)) is boom
        assert unwrap_ok(await tap_err(succeeding(1)(), errors.append)) == 1
        assert errors == [boom]

    asyncio.run(run())


def test_tap_raising_effect_fails_result() -> None:
    async def run() -> None:
        def broken(_: object) -> None:
            raise RuntimeError("observer crashed")

        outcome: Outcome[int, Failure] = Outcome.fulfilled(1)
        assert isinstance(unwrap_error(await tap(outcome, broken)), RuntimeError)

    asyncio.run(run())
