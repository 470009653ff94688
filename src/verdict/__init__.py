"""Verdict - typed validation outcomes and memoization for Python.

Expected failures are data, not exceptions: an Outcome is either a success
holding a value or a failure holding one or more ValidationMessages, each built
from a MessageKeyDefinition whose typed parameters are checked at construction.

Quick Start:
    >>> from verdict import MessageKeyDefinition, ValidationPipeline, error, ok
    >>>
    >>> TOO_SHORT = (
    ...     MessageKeyDefinition.create("user.username.too_short")
    ...     .with_string_parameter("username")
    ...     .with_int_parameter("min_length")
    ... )
    >>>
    >>> def min_length(name: str):
    ...     return ok() if len(name) >= 3 else error(TOO_SHORT, name, 3)
    >>>
    >>> outcome = ValidationPipeline[str]().add_rule(min_length).validate("jo")
    >>> outcome.to_string_with_parameters()
    'ValidationKey: user.username.too_short Parameters: jo, 3'

Transformations:
    >>> ok(5).map(lambda x: x * 2).bind(lambda x: ok(x + 1)).value
    11

Memoization:
    >>> from verdict import memoize
    >>> @memoize
    ... def slow_square(n: int) -> int:
    ...     return n * n
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .errors import ArgumentMismatch, ErrorCode, InvalidArgument, OutcomeError, VerdictError

# Message keys
from .messages import MessageKeyDefinition, ParameterDescriptor, ParameterType, ValidationMessage

# Outcome algebra
from .monads import (
    Outcome,
    bind_async,
    bind_sync,
    do_async,
    error,
    map_async,
    match_async,
    merge_all,
    merge_all_async,
    merge_all_values,
    merge_all_values_async,
    ok,
    on_success_all,
    traverse_all,
    traverse_all_async,
    traverse_partial,
    traverse_partial_async,
    try_operation,
    try_operation_async,
)

# Pipeline
from .pipeline import ValidationPipeline

# Memoization
from .memo import (
    ExpiringMemoizedFunction,
    Lazy,
    MemoizationFactory,
    MemoizedFunction,
    create_memoized_outcome,
    memoize,
    memoize_outcome,
    memoize_outcome_with_key,
)

# Configuration
from .config import VerdictSettings, get_settings
from .log import configure_logging

__all__ = [
    "__version__",
    # Errors
    "ErrorCode", "VerdictError", "ArgumentMismatch", "InvalidArgument", "OutcomeError",
    # Message keys
    "ParameterType", "ParameterDescriptor", "MessageKeyDefinition", "ValidationMessage",
    # Outcome
    "Outcome", "ok", "error", "try_operation", "try_operation_async",
    "map_async", "bind_async", "bind_sync", "match_async", "do_async",
    "merge_all", "merge_all_values", "merge_all_async", "merge_all_values_async",
    "on_success_all", "traverse_all", "traverse_partial", "traverse_all_async", "traverse_partial_async",
    # Pipeline
    "ValidationPipeline",
    # Memoization
    "memoize", "Lazy", "MemoizedFunction", "ExpiringMemoizedFunction", "MemoizationFactory",
    "memoize_outcome", "memoize_outcome_with_key", "create_memoized_outcome",
    # Configuration
    "VerdictSettings", "get_settings", "configure_logging",
]
