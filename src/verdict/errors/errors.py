"""Exception taxonomy for programmer errors.

Expected failure states (a username that is too short, an email that does not
parse) are never raised: they travel as ValidationMessages inside an Outcome.
The exceptions here signal that the wiring itself is broken, e.g. a message key
called with the wrong number of arguments.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..messages import ParameterDescriptor, ValidationMessage


class ErrorCode(StrEnum):
    """Machine-readable classification of library exceptions."""
    ARGUMENT_MISMATCH = "ARGUMENT_MISMATCH"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    OUTCOME_FAILURE = "OUTCOME_FAILURE"
    MISSING_VALUE = "MISSING_VALUE"


class VerdictError(Exception):
    """Base for all exceptions raised by verdict."""

    code: ErrorCode = ErrorCode.OUTCOME_FAILURE

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ArgumentMismatch(VerdictError, ValueError):
    """Arguments supplied for a message key don't match its parameter definition.

    Attributes:
        key: Identifier of the MessageKeyDefinition
        expected: The definition's parameter descriptors, in order
        actual_count: Number of arguments actually supplied
    """

    code = ErrorCode.ARGUMENT_MISMATCH

    def __init__(self, key: str, expected: Sequence[ParameterDescriptor], actual_count: int) -> None:
        self.key = key
        self.expected = tuple(expected)
        self.actual_count = actual_count
        specs = ", ".join(str(p) for p in self.expected) or "<none>"
        super().__init__(
            f"Arguments do not match definition '{key}': expected ({specs}), got {actual_count} argument(s)"
        )


class InvalidArgument(VerdictError, ValueError):
    """A value was formatted with a descriptor whose type it does not satisfy."""

    code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, parameter_name: str, expected_type: str, value: object) -> None:
        self.parameter_name = parameter_name
        self.expected_type = expected_type
        self.value = value
        super().__init__(f"Value {value!r} is not valid for parameter '{parameter_name}' of type {expected_type}")


class OutcomeError(VerdictError):
    """Raised when a failing Outcome is forced into a value or asserted successful."""

    __slots__ = ("messages",)

    def __init__(self, messages: Sequence[ValidationMessage], message: str | None = None) -> None:
        self.messages = tuple(messages)
        keys = ", ".join(m.key_definition.key for m in self.messages)
        super().__init__(message or f"Outcome failed: {keys}")

    @classmethod
    def missing_value(cls, messages: Sequence[ValidationMessage]) -> Self:
        """Error for reading the value of a failed Outcome."""
        err = cls(messages, f"Failed outcome has no value ({len(messages)} message(s))")
        err.code = ErrorCode.MISSING_VALUE
        return err
