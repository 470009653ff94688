"""Rule-based validation pipeline.

A pipeline holds an ordered list of rules ``T -> Outcome`` and, optionally, async
rules ``T -> Awaitable[Outcome]``. Validation always runs every rule (fail-slow)
and merges their messages.

Example:
    >>> pipeline = (
    ...     ValidationPipeline[str]()
    ...     .add_rule(lambda s: ok() if s else error(REQUIRED))
    ...     .add_rule(lambda s: ok() if len(s) <= 20 else error(TOO_LONG, 20))
    ... )
    >>> pipeline.validate("alice").value
    'alice'
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable
from typing import Callable, Generic, Self, TypeVar

from ..interop import run_sync
from ..monads import Outcome, merge_all, ok

T = TypeVar("T")

SyncRule = Callable[[T], Outcome[object]]
AsyncRule = Callable[[T], Awaitable[Outcome[object]]]

logger = logging.getLogger("verdict.pipeline")


class ValidationPipeline(Generic[T]):
    """Ordered sync and async rules applied to a value, merged fail-slow."""

    __slots__ = ("_sync_rules", "_async_rules")

    def __init__(self) -> None:
        self._sync_rules: list[SyncRule[T]] = []
        self._async_rules: list[AsyncRule[T]] = []

    def add_rule(self, rule: SyncRule[T] | AsyncRule[T]) -> Self:
        """Register a rule.

        Coroutine functions, and objects whose ``__call__`` is a coroutine
        function, are registered as async rules.
        """
        if inspect.iscoroutinefunction(rule) or inspect.iscoroutinefunction(getattr(rule, "__call__", None)):
            self._async_rules.append(rule)
        else:
            self._sync_rules.append(rule)  # type: ignore[arg-type]
        return self

    def add_async_rule(self, rule: AsyncRule[T]) -> Self:
        """Register a rule returning an awaitable (e.g. a lambda wrapping a coroutine)."""
        self._async_rules.append(rule)
        return self

    @property
    def rule_count(self) -> int:
        return len(self._sync_rules) + len(self._async_rules)

    def validate(self, value: T) -> Outcome[T]:
        """Run every rule against value.

        Without async rules this never touches an event loop. With async rules
        it runs validate_async to completion via run_sync.
        """
        if self._async_rules:
            return run_sync(self.validate_async(value))
        return self._finish(value, merge_all([rule(value) for rule in self._sync_rules]))

    async def validate_async(self, value: T) -> Outcome[T]:
        """Run sync rules, then all async rules concurrently, and merge the outcomes."""
        outcomes = [rule(value) for rule in self._sync_rules]
        outcomes.extend(await asyncio.gather(*(rule(value) for rule in self._async_rules)))
        return self._finish(value, merge_all(outcomes))

    @staticmethod
    def _finish(value: T, merged: Outcome[None]) -> Outcome[T]:
        if merged.is_success:
            return ok(value)
        logger.debug(f"Validation failed with {len(merged.messages)} message(s): {merged}")
        return Outcome.from_messages(merged.messages)

    def __repr__(self) -> str:
        return f"ValidationPipeline(sync={len(self._sync_rules)}, async={len(self._async_rules)})"
