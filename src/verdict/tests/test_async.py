"""Tests for async Outcome operators and async collection operations."""

from __future__ import annotations

import asyncio

import pytest

from verdict import (
    MessageKeyDefinition,
    Outcome,
    bind_async,
    bind_sync,
    do_async,
    error,
    map_async,
    match_async,
    merge_all_async,
    merge_all_values_async,
    ok,
    traverse_all_async,
    traverse_partial_async,
    try_operation_async,
)

REQUIRED = MessageKeyDefinition.create("field.required")
MUST_BE_ODD = MessageKeyDefinition.create("number.must_be_odd").with_int_parameter("value")
FETCH_FAILED = MessageKeyDefinition.create("fetch.failed").with_string_parameter("reason")


async def pending(outcome: Outcome[object]) -> Outcome[object]:
    await asyncio.sleep(0)
    return outcome


async def odd_only(n: int) -> Outcome[int]:
    await asyncio.sleep(0)
    return ok(n * 10) if n % 2 else error(MUST_BE_ODD, n)


# ═════════════════════════════════════════════════════════════════════════════
# Operators
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_map_async_with_sync_and_async_mappers() -> None:
    """Mappers may be plain callables or coroutine functions."""
    async def double(x: int) -> int:
        return x * 2

    assert (await map_async(ok(5), double)).value == 10
    assert (await map_async(pending(ok(5)), lambda x: x + 1)).value == 6
    assert (await ok(5).map_async(double)).value == 10


@pytest.mark.asyncio
async def test_bind_async_chains() -> None:
    """bind_async returns the binder's outcome."""
    async def check(x: int) -> Outcome[int]:
        return ok(x) if x > 0 else error(REQUIRED)

    assert (await bind_async(pending(ok(3)), check)).value == 3
    assert (await bind_async(ok(-1), check)).is_failure
    assert (await ok(3).bind_async(check)).value == 3
    assert (await bind_sync(pending(ok(3)), lambda x: ok(x * 3))).value == 9


@pytest.mark.asyncio
async def test_failure_never_invokes_callbacks() -> None:
    """Failed sources skip map, bind and do callbacks."""
    calls = 0

    async def count(x: object) -> Outcome[object]:
        nonlocal calls
        calls += 1
        return ok(x)

    failed = error(REQUIRED)
    assert (await map_async(failed, count)).messages == failed.messages
    assert (await bind_async(pending(failed), count)).is_failure
    assert (await bind_sync(failed, lambda x: ok(x))).is_failure
    assert await do_async(failed, count) is failed
    assert calls == 0


@pytest.mark.asyncio
async def test_match_async() -> None:
    """match_async runs one handler; handlers may be sync or async."""
    async def on_ok(v: int) -> str:
        return f"ok {v}"

    assert await match_async(ok(1), on_ok, lambda msgs: "failed") == "ok 1"
    assert await match_async(pending(error(REQUIRED)), on_ok, lambda msgs: f"{len(msgs)}") == "1"
    assert await error(REQUIRED).match_async(on_ok, lambda msgs: "failed") == "failed"


@pytest.mark.asyncio
async def test_do_async_runs_side_effect() -> None:
    """do_async awaits the action and returns the same outcome."""
    seen: list[int] = []

    async def record(v: int) -> None:
        seen.append(v)

    r = await ok(4).do_async(record)
    assert r.value == 4
    assert seen == [4]


@pytest.mark.asyncio
async def test_try_operation_async() -> None:
    """Exceptions from awaited operations become failures."""
    async def fetch() -> str:
        return "payload"

    async def broken() -> str:
        raise ConnectionError("refused")

    assert (await try_operation_async(fetch, FETCH_FAILED)).value == "payload"
    r = await try_operation_async(broken, FETCH_FAILED)
    assert r.messages[0].parameters == ("refused",)


# ═════════════════════════════════════════════════════════════════════════════
# Collections
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_merge_all_async() -> None:
    """Pending outcomes are awaited and merged fail-slow."""
    r = await merge_all_async([pending(ok(1)), pending(error(REQUIRED)), pending(error(MUST_BE_ODD, 2))])
    assert len(r.messages) == 2
    assert (await merge_all_async([])) == ok()


@pytest.mark.asyncio
async def test_merge_all_values_async() -> None:
    """Values are collected in order."""
    assert (await merge_all_values_async([pending(ok(1)), pending(ok(2))])).value == [1, 2]
    assert (await merge_all_values_async([pending(ok(1)), pending(error(REQUIRED))])).is_failure


@pytest.mark.asyncio
async def test_traverse_all_async() -> None:
    """All items visited; failures accumulated in input order."""
    assert (await traverse_all_async([1, 3], odd_only)).value == [10, 30]
    r = await traverse_all_async([1, 2, 3, 4, 5], odd_only)
    assert [m.parameters for m in r.messages] == [("2",), ("4",)]


@pytest.mark.asyncio
async def test_traverse_partial_async_preserves_order() -> None:
    """Concurrent transforms still yield values in input order."""
    async def delayed(n: int) -> Outcome[int]:
        await asyncio.sleep(0.01 * (5 - n))
        return ok(n) if n != 3 else error(MUST_BE_ODD, n)

    r = await traverse_partial_async([1, 2, 3, 4], delayed)
    assert r.value == [1, 2, 4]
    assert (await traverse_partial_async([2, 4], odd_only)).value == []
