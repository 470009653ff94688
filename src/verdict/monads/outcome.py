"""Outcome: success with a value, or failure with one or more ValidationMessages.

A discriminated union for railway-oriented validation:
- Functor: map
- Monad: bind (and_then)
- Elimination: match, unwrap, unwrap_or
- Guards: ensure / filter
- Side effects: do
- Combination: merge (right-biased value), merge_messages

An Outcome with zero messages is a success; one with any message is a failure
and carries no value. Outcome[None] plays the role of a value-less result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Callable, Generic, TypeVar, overload

from ..errors import OutcomeError
from ..messages import MessageKeyDefinition, ValidationMessage

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterator

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type
R = TypeVar("R")  # Match result type

logger = logging.getLogger("verdict.monads")

_EMPTY: tuple[ValidationMessage, ...] = ()


class Outcome(Generic[T]):
    """Sum type of success (value, no messages) and failure (messages, no value).

    Build with ``ok``/``error`` or the ``from_*`` classmethods; never mutate.

    Examples:
        >>> ok(21).map(lambda x: x * 2).value
        42
        >>> TOO_SHORT = MessageKeyDefinition.create("name.too_short").with_int_parameter("min")
        >>> failed = ok("jo").ensure(lambda s: len(s) >= 3, TOO_SHORT, 3)
        >>> failed.is_failure, str(failed)
        (True, 'name.too_short')

    Notes:
        - Uses __slots__, immutable by convention
        - Callback exceptions propagate; use try_operation to capture them
    """

    __slots__ = ("_value", "_messages")
    __match_args__ = ("_value", "_messages")

    def __init__(self, value: T | None, messages: tuple[ValidationMessage, ...] = _EMPTY) -> None:
        """Private constructor. Use ok() / error() instead."""
        self._value = value if not messages else None
        self._messages = messages

    # ─── Named constructors ──────────────────────────────────────────

    @classmethod
    def from_value(cls, value: T) -> Outcome[T]:
        """Successful outcome holding value."""
        return cls(value)

    @classmethod
    def from_error(cls, key_definition: MessageKeyDefinition, *args: object) -> Outcome[T]:
        """Failed outcome with a single message built from key_definition and args."""
        return cls(None, (ValidationMessage.create(key_definition, *args),))

    @classmethod
    def from_messages(cls, messages: Iterable[ValidationMessage]) -> Outcome[T]:
        """Outcome holding messages; success if the iterable is empty."""
        return cls(None, tuple(messages))

    # ─── Type Checking ───────────────────────────────────────────────

    @property
    def is_success(self) -> bool:
        return not self._messages

    @property
    def is_failure(self) -> bool:
        return bool(self._messages)

    @property
    def messages(self) -> tuple[ValidationMessage, ...]:
        """Validation messages in detection order (empty on success)."""
        return self._messages

    # ─── Value Extraction ────────────────────────────────────────────

    @property
    def value(self) -> T:
        """The success value.

        Raises:
            OutcomeError: On a failed outcome, which has no value
        """
        if self._messages:
            raise OutcomeError.missing_value(self._messages)
        return self._value  # type: ignore[return-value]

    def unwrap(self) -> T:
        """Alias for ``value``."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return default if self._messages else self._value  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[tuple[ValidationMessage, ...]], T]) -> T:
        """Success value, or f(messages) on failure."""
        return f(self._messages) if self._messages else self._value  # type: ignore[return-value]

    def raise_if_failure(self) -> None:
        """Raise OutcomeError carrying the messages if this outcome failed."""
        if self._messages:
            raise OutcomeError(self._messages)

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Outcome[U]:
        """Apply f to the value. Failures pass through without calling f."""
        if self._messages:
            return Outcome(None, self._messages)
        return Outcome(f(self._value))  # type: ignore[arg-type]

    def bind(self, f: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Chain a fallible step; its outcome is returned verbatim.

        Example:
            >>> ok(4).bind(lambda x: ok(x + 1)).value
            5
        """
        if self._messages:
            return Outcome(None, self._messages)
        return f(self._value)  # type: ignore[arg-type]

    def and_then(self, f: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Alias for bind."""
        return self.bind(f)

    def match(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[tuple[ValidationMessage, ...]], R],
    ) -> R:
        """Run exactly one branch and return its result."""
        if self._messages:
            return on_failure(self._messages)
        return on_success(self._value)  # type: ignore[arg-type]

    def ensure(
        self,
        predicate: Callable[[T], bool],
        error_key: MessageKeyDefinition,
        *args: object,
    ) -> Outcome[T]:
        """Replace a success whose value fails predicate with error(error_key, *args)."""
        if self._messages or predicate(self._value):  # type: ignore[arg-type]
            return self
        return Outcome(None, (ValidationMessage.create(error_key, *args),))

    def filter(
        self,
        predicate: Callable[[T], bool],
        error_key: MessageKeyDefinition,
        *args: object,
    ) -> Outcome[T]:
        """Alias for ensure."""
        return self.ensure(predicate, error_key, *args)

    def do(self, action: Callable[[T], object]) -> Outcome[T]:
        """Run action on the value for side effects; always return self."""
        if not self._messages:
            action(self._value)  # type: ignore[arg-type]
        return self

    def on_success(self, next_outcome: Callable[[], Outcome[U]]) -> Outcome[U] | Outcome[T]:
        """Evaluate next_outcome only if this outcome succeeded."""
        if self._messages:
            return self
        return next_outcome()

    # ─── Async delegates ─────────────────────────────────────────────

    def map_async(self, f: Callable[[T], Awaitable[U] | U]) -> Awaitable[Outcome[U]]:
        from .aio import map_async
        return map_async(self, f)

    def bind_async(self, f: Callable[[T], Awaitable[Outcome[U]] | Outcome[U]]) -> Awaitable[Outcome[U]]:
        from .aio import bind_async
        return bind_async(self, f)

    def match_async(
        self,
        on_success: Callable[[T], Awaitable[R] | R],
        on_failure: Callable[[tuple[ValidationMessage, ...]], Awaitable[R] | R],
    ) -> Awaitable[R]:
        from .aio import match_async
        return match_async(self, on_success, on_failure)

    def do_async(self, action: Callable[[T], Awaitable[object] | object]) -> Awaitable[Outcome[T]]:
        from .aio import do_async
        return do_async(self, action)

    # ─── Combination ─────────────────────────────────────────────────

    def merge(self, other: Outcome[U]) -> Outcome[U]:
        """Concatenate messages (self first). Right-biased: both succeeding keeps other's value."""
        if not self._messages and not other._messages:
            return other
        return Outcome(None, self._messages + other._messages)

    def merge_messages(self, *others: Outcome[object]) -> Outcome[None]:
        """Concatenate messages of self and others, discarding every value."""
        merged = self._messages
        for o in others:
            merged += o._messages
        return Outcome(None, merged)

    # ─── Conversion & Diagnostics ────────────────────────────────────

    def to_tuple(self) -> tuple[bool, tuple[ValidationMessage, ...], T | None]:
        """Deconstruct into (is_success, messages, value_or_None)."""
        return (not self._messages, self._messages, self._value)

    def to_string_with_parameters(self) -> str:
        """Comma-joined ValidationMessage.render() output."""
        return ", ".join(m.render() for m in self._messages)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True on success."""
        return not self._messages

    def __iter__(self) -> Iterator[T]:
        """Yield the value on success, nothing on failure."""
        if not self._messages:
            yield self._value  # type: ignore[misc]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._messages == other._messages and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._messages, self._value))

    def __repr__(self) -> str:
        if self._messages:
            return f"Failure({[m.key_definition.key for m in self._messages]!r})"
        return f"Ok({self._value!r})"

    def __str__(self) -> str:
        """Comma-joined definition keys of the messages."""
        return ", ".join(m.key_definition.key for m in self._messages)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


@overload
def ok() -> Outcome[None]: ...
@overload
def ok(value: T) -> Outcome[T]: ...
def ok(value: T | None = None) -> Outcome[T] | Outcome[None]:
    """Successful outcome, optionally carrying a value."""
    return Outcome(value)


def error(
    source: MessageKeyDefinition | ValidationMessage | Outcome[object] | Iterable[ValidationMessage],
    *args: object,
) -> Outcome[T]:
    """Failed outcome.

    Accepts a MessageKeyDefinition plus its arguments, a single ValidationMessage,
    another Outcome (its messages are copied) or an iterable of messages.

    Raises:
        ArgumentMismatch: If args don't fit the key definition
    """
    if isinstance(source, MessageKeyDefinition):
        return Outcome(None, (ValidationMessage.create(source, *args),))
    if args:
        raise TypeError("Arguments are only accepted together with a MessageKeyDefinition")
    if isinstance(source, ValidationMessage):
        return Outcome(None, (source,))
    if isinstance(source, Outcome):
        return Outcome(None, source.messages)
    return Outcome(None, tuple(source))


def try_operation(operation: Callable[[], T], error_key: MessageKeyDefinition, *args: object) -> Outcome[T]:
    """Run operation, converting any exception into error(error_key, *args, str(exc)).

    error_key must declare one more parameter than args supplies, for the
    exception message.

    Example:
        >>> PARSE = MessageKeyDefinition.create("parse.failed").with_string_parameter("reason")
        >>> try_operation(lambda: int("x"), PARSE).is_failure
        True
    """
    try:
        return Outcome(operation())
    except Exception as e:
        logger.debug(f"try_operation captured {type(e).__name__} as {error_key.key}")
        return Outcome(None, (ValidationMessage.create(error_key, *args, str(e)),))
