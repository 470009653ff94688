"""Memoization engine.

- memoize: decorator for functions of any arity (exactly-once for no-arg functions)
- MemoizedFunction: keyed cache with hit/miss statistics and cache management
- ExpiringMemoizedFunction: expiration plus LRU size bound
- MemoizationFactory: chooses the backing implementation from the bounds
- memoize_outcome / memoize_outcome_with_key / create_memoized_outcome: Outcome helpers

Every wrapper owns an independent cache; there is no module-level cache state.
"""

from .factory import MemoizationFactory, create_memoized_outcome, memoize_outcome, memoize_outcome_with_key
from .function import CacheEntry, ExpiringMemoizedFunction, MemoizedFunction
from .lazy import Lazy
from .memoize import CallKey, memoize

__all__ = [
    "memoize",
    "CallKey",
    "Lazy",
    "MemoizedFunction",
    "ExpiringMemoizedFunction",
    "CacheEntry",
    "MemoizationFactory",
    "memoize_outcome",
    "memoize_outcome_with_key",
    "create_memoized_outcome",
]
