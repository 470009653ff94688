"""Outcome type and its transformation algebra.

Provides the Outcome sum type for validation-aware error handling with:
- Railway-oriented composition (map, bind, match, ensure, do)
- Async operators accepting pending outcomes
- Fail-slow merge/traverse and fail-fast on_success_all
- try_operation as the single exception-to-outcome boundary

Example:
    >>> from verdict.monads import ok, error, traverse_all
    >>> traverse_all([1, 2, 3], lambda x: ok(x * 2)).value
    [2, 4, 6]
"""

from .aggregate import (
    merge_all,
    merge_all_async,
    merge_all_values,
    merge_all_values_async,
    on_success_all,
    traverse_all,
    traverse_all_async,
    traverse_partial,
    traverse_partial_async,
)
from .aio import bind_async, bind_sync, do_async, map_async, match_async, try_operation_async
from .outcome import Outcome, error, ok, try_operation

__all__ = [
    # Core type
    "Outcome", "ok", "error", "try_operation", "try_operation_async",
    # Async operators
    "map_async", "bind_async", "bind_sync", "match_async", "do_async",
    # Collection operations
    "merge_all", "merge_all_values", "merge_all_async", "merge_all_values_async",
    "on_success_all",
    "traverse_all", "traverse_partial", "traverse_all_async", "traverse_partial_async",
]
