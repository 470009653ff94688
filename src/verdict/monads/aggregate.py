"""Collection operations over Outcomes.

Fail-slow (evaluate everything, accumulate every message):
    merge_all, merge_all_values, traverse_all and their async forms
Fail-fast (stop at the first failure):
    on_success_all
Lossy (drop failures, never fail):
    traverse_partial, traverse_partial_async
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Callable, TypeVar

from ..messages import ValidationMessage
from .outcome import Outcome, ok

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable

T = TypeVar("T")
U = TypeVar("U")


# ─────────────────────────────────────────────────────────────────────────────
# Merge
# ─────────────────────────────────────────────────────────────────────────────


def merge_all(outcomes: Iterable[Outcome[object]]) -> Outcome[None]:
    """Left fold over merge seeded with ok(); values are discarded.

    Example:
        >>> merge_all([]) == ok()
        True
    """
    messages: list[ValidationMessage] = []
    for outcome in outcomes:
        messages.extend(outcome.messages)
    return Outcome.from_messages(messages)


def merge_all_values(outcomes: Iterable[Outcome[T]]) -> Outcome[list[T]]:
    """Collect values into a list; any failure fails the result with ALL messages.

    Example:
        >>> merge_all_values([ok(1), ok(2)]).value
        [1, 2]
    """
    values: list[T] = []
    messages: list[ValidationMessage] = []
    for outcome in outcomes:
        if outcome.is_success:
            values.append(outcome.value)
        else:
            messages.extend(outcome.messages)
    return Outcome.from_messages(messages) if messages else ok(values)


async def merge_all_async(outcomes: Iterable[Awaitable[Outcome[object]]]) -> Outcome[None]:
    """Await each pending outcome in order and merge their messages."""
    messages: list[ValidationMessage] = []
    for pending in outcomes:
        messages.extend((await pending).messages)
    return Outcome.from_messages(messages)


async def merge_all_values_async(outcomes: Iterable[Awaitable[Outcome[T]]]) -> Outcome[list[T]]:
    """Await each pending outcome in order and collect values fail-slow."""
    return merge_all_values([await pending for pending in outcomes])


# ─────────────────────────────────────────────────────────────────────────────
# Fail-fast sequencing
# ─────────────────────────────────────────────────────────────────────────────


def on_success_all(steps: Iterable[Outcome[object] | Callable[[], Outcome[object]]]) -> Outcome[object]:
    """Evaluate steps in order, stopping at the first failure.

    Each step is either an Outcome or a zero-argument callable producing one;
    callables after the first failure are never invoked, and a lazy iterable is
    not advanced past it. Returns the last outcome, ok() for no steps, or the
    first failure.

    Example:
        >>> calls = []
        >>> def step(o):
        ...     return lambda: calls.append(o) or o
        >>> on_success_all([step(ok()), step(error(KEY)), step(ok())]).is_failure
        True
        >>> len(calls)
        2
    """
    current: Outcome[object] = ok()
    for step in steps:
        current = current.on_success(step if callable(step) else (lambda s=step: s))
        if current.is_failure:
            return current
    return current


# ─────────────────────────────────────────────────────────────────────────────
# Traverse
# ─────────────────────────────────────────────────────────────────────────────


def traverse_all(items: Iterable[T], transform: Callable[[T], Outcome[U]]) -> Outcome[list[U]]:
    """Apply transform to every item (no short-circuit); fail with all messages if any fail.

    Example:
        >>> traverse_all([1, 2, 3], lambda x: ok(x * 2)).value
        [2, 4, 6]
    """
    return merge_all_values(transform(item) for item in items)


def traverse_partial(items: Iterable[T], transform: Callable[[T], Outcome[U]]) -> Outcome[list[U]]:
    """Apply transform to every item, keep successful values, drop failures. Never fails."""
    return ok([o.value for o in map(transform, items) if o.is_success])


async def traverse_all_async(
    items: Iterable[T],
    transform: Callable[[T], Awaitable[Outcome[U]]],
) -> Outcome[list[U]]:
    """Async traverse_all. Items are awaited one after another, in input order."""
    return merge_all_values([await transform(item) for item in items])


async def traverse_partial_async(
    items: Iterable[T],
    transform: Callable[[T], Awaitable[Outcome[U]]],
) -> Outcome[list[U]]:
    """Async traverse_partial. Transforms run concurrently; output keeps input order."""
    outcomes = await asyncio.gather(*(transform(item) for item in items))
    return ok([o.value for o in outcomes if o.is_success])
