"""memoize: cache any function by its arguments.

Zero-parameter functions get exactly-once semantics through Lazy. Functions
with parameters get an independent, thread-safe cache keyed by the argument
tuple (keyword arguments included), so 1-, 2- and 3-ary functions all share
one implementation.

Example:
    >>> @memoize
    ... def distance(a: tuple[int, int], b: tuple[int, int]) -> float:
    ...     return ((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2) ** 0.5
    >>> distance((0, 0), (3, 4))
    5.0
"""

from __future__ import annotations

import functools
import inspect
from dataclasses import dataclass
from typing import Callable, ParamSpec, TypeVar

from .function import MemoizedFunction
from .lazy import Lazy

P = ParamSpec("P")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class CallKey:
    """Structural cache key for one call: positional args plus sorted keyword items."""
    args: tuple[object, ...]
    kwargs: tuple[tuple[str, object], ...] = ()

    @classmethod
    def of(cls, *args: object, **kwargs: object) -> CallKey:
        return cls(args, tuple(sorted(kwargs.items())))


def _takes_arguments(fn: Callable[..., object]) -> bool:
    try:
        return bool(inspect.signature(fn).parameters)
    except (TypeError, ValueError):
        return True


def memoize(fn: Callable[P, R]) -> Callable[P, R]:
    """Return a memoized wrapper owning its own cache.

    The backing store is exposed as ``wrapper.cache``: a Lazy for
    zero-parameter functions, otherwise a MemoizedFunction keyed by CallKey.

    Raises:
        TypeError: At call time, if an argument is unhashable
    """
    if fn is None:
        raise TypeError("fn must not be None")

    if not _takes_arguments(fn):
        lazy: Lazy[R] = Lazy(fn)  # type: ignore[arg-type]

        @functools.wraps(fn)
        def once() -> R:
            return lazy.value

        once.cache = lazy  # type: ignore[attr-defined]
        return once  # type: ignore[return-value]

    cache: MemoizedFunction[CallKey, R] = MemoizedFunction(
        lambda key: fn(*key.args, **dict(key.kwargs))  # type: ignore[arg-type]
    )

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        return cache.invoke(CallKey.of(*args, **kwargs))

    wrapper.cache = cache  # type: ignore[attr-defined]
    return wrapper
