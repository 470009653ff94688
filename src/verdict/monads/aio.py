"""Async Outcome operators.

Every operator accepts either an Outcome or an awaitable resolving to one, so
chains can start from a pending computation. Callbacks may be coroutine
functions or plain callables; awaitable results are awaited. A failed outcome
never schedules the callback.

Example:
    >>> async def fetch_price(sku: str) -> float: ...
    >>> total = await map_async(lookup_sku(code), fetch_price)
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Callable, TypeVar

from ..messages import ValidationMessage
from .outcome import Outcome

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from ..messages import MessageKeyDefinition

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

logger = logging.getLogger("verdict.monads")


async def _resolve(source: Outcome[T] | Awaitable[Outcome[T]]) -> Outcome[T]:
    return source if isinstance(source, Outcome) else await source


async def _call(f: Callable[..., object], *args: object) -> object:
    result = f(*args)
    return await result if inspect.isawaitable(result) else result


async def map_async(
    source: Outcome[T] | Awaitable[Outcome[T]],
    mapper: Callable[[T], Awaitable[U] | U],
) -> Outcome[U]:
    """Async map: await the source, then the mapper, and wrap as success."""
    outcome = await _resolve(source)
    if outcome.is_failure:
        return Outcome(None, outcome.messages)
    return Outcome(await _call(mapper, outcome.value))  # type: ignore[arg-type]


async def bind_async(
    source: Outcome[T] | Awaitable[Outcome[T]],
    binder: Callable[[T], Awaitable[Outcome[U]] | Outcome[U]],
) -> Outcome[U]:
    """Async bind: the binder's outcome is returned verbatim."""
    outcome = await _resolve(source)
    if outcome.is_failure:
        return Outcome(None, outcome.messages)
    return await _call(binder, outcome.value)  # type: ignore[return-value]


async def bind_sync(
    source: Outcome[T] | Awaitable[Outcome[T]],
    binder: Callable[[T], Outcome[U]],
) -> Outcome[U]:
    """Bind a synchronous step onto a pending outcome."""
    outcome = await _resolve(source)
    if outcome.is_failure:
        return Outcome(None, outcome.messages)
    return binder(outcome.value)


async def match_async(
    source: Outcome[T] | Awaitable[Outcome[T]],
    on_success: Callable[[T], Awaitable[R] | R],
    on_failure: Callable[[tuple[ValidationMessage, ...]], Awaitable[R] | R],
) -> R:
    """Async match; handlers may be sync or async."""
    outcome = await _resolve(source)
    if outcome.is_failure:
        return await _call(on_failure, outcome.messages)  # type: ignore[return-value]
    return await _call(on_success, outcome.value)  # type: ignore[return-value]


async def do_async(
    source: Outcome[T] | Awaitable[Outcome[T]],
    action: Callable[[T], Awaitable[object] | object],
) -> Outcome[T]:
    """Await action on the value for side effects, returning the outcome unchanged."""
    outcome = await _resolve(source)
    if outcome.is_success:
        await _call(action, outcome.value)
    return outcome


async def try_operation_async(
    operation: Callable[[], Awaitable[T] | T],
    error_key: MessageKeyDefinition,
    *args: object,
) -> Outcome[T]:
    """Async try_operation: exceptions from operation become a failed outcome."""
    try:
        return Outcome(await _call(operation))  # type: ignore[arg-type]
    except Exception as e:
        logger.debug(f"try_operation_async captured {type(e).__name__} as {error_key.key}")
        return Outcome(None, (ValidationMessage.create(error_key, *args, str(e)),))
