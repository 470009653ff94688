"""Typed parameter slots for message keys.

Each ParameterType has one validator function registered in a dispatch table.
A value is accepted either as the native Python type or as a string that parses
into it; None is never accepted.
"""

from __future__ import annotations

import datetime as dt
import re
import uuid
from decimal import Decimal, InvalidOperation
from enum import Enum, StrEnum
from typing import Annotated, Callable

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..errors import InvalidArgument


class ParameterType(StrEnum):
    """Closed set of types a message key parameter can declare."""
    STRING = "String"
    INTEGER = "Integer"
    DECIMAL = "Decimal"
    DATETIME = "DateTime"
    TIME_OF_DAY = "TimeOfDay"
    DATE_ONLY = "DateOnly"
    BOOLEAN = "Boolean"
    GUID = "Guid"
    ENUM = "Enum"
    URI = "Uri"
    DURATION = "Duration"
    EMAIL = "Email"
    PHONE_NUMBER = "PhoneNumber"


# ─────────────────────────────────────────────────────────────────────────────
# Per-type validators
# ─────────────────────────────────────────────────────────────────────────────

_INTEGER_RE = re.compile(r"\s*[+-]?\d+\s*")
_PHONE_RE = re.compile(r"[0-9+\-\s()]*")
# [-][d.]hh:mm[:ss[.fffffff]]
_DURATION_RE = re.compile(r"-?(\d+\.)?\d{1,2}:\d{2}(:\d{2}(\.\d{1,7})?)?")
# str(timedelta): "1 day, 2:00:00", "-3 days, 23:59:59.500000", "2:00:00"
_PY_DURATION_RE = re.compile(r"(-?\d+ days?, )?\d{1,2}:\d{2}:\d{2}(\.\d{1,6})?")
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

Validator = Callable[[object], bool]


def _parses(parse: Callable[[str], object], value: object) -> bool:
    try:
        parse(str(value))
    except (ValueError, TypeError):
        return False
    return True


def _is_int(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, int) or bool(_INTEGER_RE.fullmatch(str(value)))


def _is_decimal(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    try:
        return Decimal(str(value).strip()).is_finite()
    except InvalidOperation:
        return False


def _is_datetime(value: object) -> bool:
    return isinstance(value, dt.datetime) or _parses(dt.datetime.fromisoformat, value)


def _is_date(value: object) -> bool:
    if isinstance(value, dt.datetime):
        return False
    return isinstance(value, dt.date) or _parses(dt.date.fromisoformat, value)


def _is_time(value: object) -> bool:
    return isinstance(value, dt.time) or _parses(dt.time.fromisoformat, value)


def _is_duration(value: object) -> bool:
    if isinstance(value, dt.timedelta):
        return True
    text = str(value).strip()
    return bool(_DURATION_RE.fullmatch(text) or _PY_DURATION_RE.fullmatch(text))


def _is_bool(value: object) -> bool:
    return isinstance(value, bool) or str(value).lower() in ("true", "false")


def _is_guid(value: object) -> bool:
    return isinstance(value, uuid.UUID) or _parses(uuid.UUID, value)


def _is_uri(value: object) -> bool:
    if isinstance(value, AnyUrl):
        return True
    if not isinstance(value, str):
        return False
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


def _is_email(value: object) -> bool:
    """Syntax-only check; the input must already be in its normalized form."""
    if not isinstance(value, str):
        return False
    try:
        address = validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        ).normalized
    except EmailNotValidError:
        return False
    return address.lower() == value.lower()


def _is_phone(value: object) -> bool:
    return (
        isinstance(value, str)
        and bool(value.strip())
        and len(value) >= 8
        and bool(_PHONE_RE.fullmatch(value))
    )


_VALIDATORS: dict[ParameterType, Validator] = {
    ParameterType.STRING: lambda v: isinstance(v, str),
    ParameterType.INTEGER: _is_int,
    ParameterType.DECIMAL: _is_decimal,
    ParameterType.DATETIME: _is_datetime,
    ParameterType.TIME_OF_DAY: _is_time,
    ParameterType.DATE_ONLY: _is_date,
    ParameterType.BOOLEAN: _is_bool,
    ParameterType.GUID: _is_guid,
    ParameterType.ENUM: lambda v: isinstance(v, Enum),
    ParameterType.URI: _is_uri,
    ParameterType.DURATION: _is_duration,
    ParameterType.EMAIL: _is_email,
    ParameterType.PHONE_NUMBER: _is_phone,
}


def validator_for(param_type: ParameterType) -> Validator:
    """Look up the validator registered for a parameter type."""
    return _VALIDATORS[param_type]


# ─────────────────────────────────────────────────────────────────────────────
# Descriptor
# ─────────────────────────────────────────────────────────────────────────────


class ParameterDescriptor(BaseModel):
    """One named, typed parameter slot of a MessageKeyDefinition. Frozen.

    Example:
        >>> p = ParameterDescriptor(name="count", type=ParameterType.INTEGER)
        >>> p.validate_value("12"), p.validate_value("twelve")
        (True, False)
        >>> p.format(12)
        '12'
    """

    model_config = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

    name: Annotated[str, Field(min_length=1)]
    type: ParameterType

    def __init__(self, name: str, type: ParameterType, **kw: object) -> None:  # noqa: A002
        super().__init__(name=name, type=type, **kw)

    def validate_value(self, value: object) -> bool:
        """Check value against this parameter's type. None is always rejected."""
        if value is None:
            return False
        return _VALIDATORS[self.type](value)

    def format(self, value: object) -> str:
        """Stringify value after validating it. Enum members render as their name.

        Raises:
            InvalidArgument: If value does not satisfy the parameter type
        """
        if not self.validate_value(value):
            raise InvalidArgument(self.name, self.type.value, value)
        if self.type is ParameterType.ENUM:
            return value.name  # type: ignore[attr-defined]
        return str(value)

    def __str__(self) -> str:
        return f"{self.name}: {self.type.value}"
