"""Factories for memoized functions, including Outcome-returning ones."""

from __future__ import annotations

import threading
from datetime import timedelta
from typing import TYPE_CHECKING, Callable, Hashable, TypeVar

from ..config import get_settings
from .function import ExpiringMemoizedFunction, MemoizedFunction
from .memoize import memoize

if TYPE_CHECKING:
    from ..monads import Outcome

K = TypeVar("K")
R = TypeVar("R")
T = TypeVar("T")
U = TypeVar("U")


class MemoizationFactory:
    """Build memoized single-argument functions.

    Example:
        >>> lookup = MemoizationFactory.create(load_country, max_cache_size=250)
        >>> stats = MemoizationFactory.create_configurable(load_country)
        >>> stats("BE"); stats.miss_count
        1
    """

    @staticmethod
    def create(
        function: Callable[[K], R],
        max_cache_size: int | None = None,
        expiration: timedelta | float | None = None,
    ) -> Callable[[K], R]:
        """Plain memoized callable.

        Backed by ExpiringMemoizedFunction when a size bound or expiration is
        given (explicitly or through MemoizationSettings defaults), otherwise by
        the unbounded MemoizedFunction.
        """
        settings = get_settings().memo
        if max_cache_size is None:
            max_cache_size = settings.default_max_cache_size
        if expiration is None:
            expiration = settings.default_expiration
        if max_cache_size is not None or expiration is not None:
            return ExpiringMemoizedFunction(function, max_cache_size, expiration).invoke
        return MemoizedFunction(function).invoke

    @staticmethod
    def create_configurable(function: Callable[[K], R]) -> MemoizedFunction[K, R]:
        """Inspectable MemoizedFunction with statistics and cache management."""
        return MemoizedFunction(function)


# ─────────────────────────────────────────────────────────────────────────────
# Outcome helpers
# ─────────────────────────────────────────────────────────────────────────────


def memoize_outcome(function: Callable[[T], Outcome[U]]) -> Callable[[T], Outcome[U]]:
    """Memoize an Outcome-returning function; failures are cached like successes."""
    return memoize(function)


def memoize_outcome_with_key(
    function: Callable[[T], Outcome[U]],
    key_selector: Callable[[T], Hashable],
) -> Callable[[T], Outcome[U]]:
    """Memoize by a key derived from the input, for inputs that aren't hashable themselves.

    On a miss the original input is passed to function; later inputs mapping
    to the same key get the cached outcome.

    Example:
        >>> validate = memoize_outcome_with_key(validate_order, lambda order: order.id)
    """
    cache: dict[Hashable, Outcome[U]] = {}
    lock = threading.Lock()

    def wrapper(value: T) -> Outcome[U]:
        key = key_selector(value)
        with lock:
            if key in cache:
                return cache[key]
        result = function(value)
        with lock:
            return cache.setdefault(key, result)

    return wrapper


def create_memoized_outcome(function: Callable[[T], Outcome[U]]) -> MemoizedFunction[T, Outcome[U]]:
    """Inspectable memoized Outcome function (see MemoizationFactory.create_configurable)."""
    return MemoizationFactory.create_configurable(function)
