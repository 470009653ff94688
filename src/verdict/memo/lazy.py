"""Exactly-once lazy value."""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    """Compute a value on first access, publish it once, serve it forever.

    Concurrent first callers block on a lock so ``factory`` runs at most once
    per successful computation. Exceptions are not cached: the caller that hit
    the exception sees it, and the next access retries ``factory``.

    Example:
        >>> lazy = Lazy(lambda: 42)
        >>> lazy.value, lazy.is_value_created
        (42, True)
    """

    __slots__ = ("_factory", "_value", "_lock")

    def __init__(self, factory: Callable[[], T]) -> None:
        if factory is None:
            raise TypeError("factory must not be None")
        self._factory = factory
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def is_value_created(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> T:
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]
        with self._lock:
            if self._value is _UNSET:
                self._value = self._factory()
            return self._value  # type: ignore[return-value]

    def __call__(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Lazy({self._value!r})" if self.is_value_created else "Lazy(<pending>)"
