"""Message key definitions: a stable key plus an ordered list of typed parameters.

Definitions are built once, usually as module-level constants, and extended
through the fluent ``with_*_parameter`` builders. Every builder returns a new
definition; the receiver is never modified.

Example:
    >>> USERNAME_TOO_SHORT = (
    ...     MessageKeyDefinition.create("user.username.too_short")
    ...     .with_string_parameter("username")
    ...     .with_int_parameter("min_length")
    ... )
    >>> USERNAME_TOO_SHORT.validate_arguments(["jo", 3])
    True
    >>> USERNAME_TOO_SHORT.format_arguments(["jo", 3])
    ['jo', '3']
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..errors import ArgumentMismatch
from .parameter import ParameterDescriptor, ParameterType


class MessageKeyDefinition(BaseModel):
    """Named message key with ordered, typed parameters. Frozen.

    Attributes:
        key: Stable identifier used in diagnostics and equality
        display_key: Human-facing key handed to translators (defaults to key)
        parameters: Parameter descriptors in argument order
    """

    model_config = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

    key: Annotated[str, Field(min_length=1)]
    display_key: str = ""
    parameters: tuple[ParameterDescriptor, ...] = ()

    @model_validator(mode="after")
    def fill_display_key(self) -> Self:
        if not self.display_key:
            object.__setattr__(self, "display_key", self.key)
        return self

    @classmethod
    def create(cls, key: str, *args: str | ParameterDescriptor) -> Self:
        """Build a definition.

        Accepted forms: ``create(key)``, ``create(key, display_key)``,
        ``create(key, *params)`` and ``create(key, display_key, *params)``.
        """
        if key is None:
            raise TypeError("key must not be None")
        if args and args[0] is None:
            raise TypeError("display_key must not be None")
        display_key = key
        params: Sequence[str | ParameterDescriptor] = args
        if args and isinstance(args[0], str):
            display_key, params = args[0], args[1:]
        bad = [p for p in params if not isinstance(p, ParameterDescriptor)]
        if bad:
            raise TypeError(f"Expected ParameterDescriptor, got {type(bad[0]).__name__}")
        return cls(key=key, display_key=display_key, parameters=tuple(params))  # type: ignore[arg-type]

    # ─── Argument checking ───────────────────────────────────────────

    def validate_arguments(self, args: Sequence[object] | None) -> bool:
        """True iff args match the parameters in count and per-position type."""
        if not args:
            return not self.parameters
        if len(args) != len(self.parameters):
            return False
        return all(p.validate_value(a) for p, a in zip(self.parameters, args))

    def format_arguments(self, args: Sequence[object] | None) -> list[str]:
        """Format every argument with its descriptor.

        Raises:
            ArgumentMismatch: If validate_arguments(args) is False
        """
        if not self.validate_arguments(args):
            raise ArgumentMismatch(self.key, self.parameters, len(args or ()))
        return [p.format(a) for p, a in zip(self.parameters, args or ())]

    # ─── Fluent builders ─────────────────────────────────────────────

    def with_parameter(self, name: str, param_type: ParameterType) -> MessageKeyDefinition:
        """Return a copy with one more parameter appended."""
        return MessageKeyDefinition(
            key=self.key,
            display_key=self.display_key,
            parameters=(*self.parameters, ParameterDescriptor(name, param_type)),
        )

    def with_string_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.STRING)

    def with_int_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.INTEGER)

    def with_decimal_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.DECIMAL)

    def with_datetime_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.DATETIME)

    def with_time_of_day_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.TIME_OF_DAY)

    def with_date_only_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.DATE_ONLY)

    def with_boolean_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.BOOLEAN)

    def with_guid_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.GUID)

    def with_enum_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.ENUM)

    def with_uri_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.URI)

    def with_duration_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.DURATION)

    def with_email_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.EMAIL)

    def with_phone_number_parameter(self, name: str) -> MessageKeyDefinition:
        return self.with_parameter(name, ParameterType.PHONE_NUMBER)

    def __str__(self) -> str:
        return self.key

    def __hash__(self) -> int:
        return hash((self.key, self.display_key, self.parameters))
