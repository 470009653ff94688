"""Tests for ParameterDescriptor validation and formatting."""

from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal
from enum import Enum, StrEnum

import pytest
from pydantic import AnyUrl, ValidationError

from verdict import InvalidArgument, ParameterDescriptor, ParameterType
from verdict.errors import ErrorCode


class Severity(Enum):
    LOW = 1
    HIGH = 2


def param(t: ParameterType) -> ParameterDescriptor:
    return ParameterDescriptor("p", t)


# ═════════════════════════════════════════════════════════════════════════════
# Per-type acceptance
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("param_type", "accepted", "rejected"),
    [
        (ParameterType.STRING, ["test", ""], [123, 1.5, True]),
        (ParameterType.INTEGER, [123, 2**70, "123", " -7 "], ["abc", 123.45, "1.5", True]),
        (ParameterType.DECIMAL, [123.45, Decimal("9.99"), "123.45", 7], ["abc", "NaN", False]),
        (ParameterType.DATETIME, [dt.datetime(2025, 1, 1), "2025-01-01", "2025-01-01T10:30:00"], ["not a date"]),
        (ParameterType.DATE_ONLY, [dt.date(2025, 1, 1), "2025-01-01"], ["not a date", dt.datetime(2025, 1, 1)]),
        (ParameterType.TIME_OF_DAY, [dt.time(14, 30), "14:30", "14:30:05"], ["not a time"]),
        (ParameterType.DURATION, [dt.timedelta(hours=2), "02:00:00", "1.02:00:00", "1 day, 2:00:00"], ["not a timespan"]),
        (ParameterType.BOOLEAN, [True, False, "true", "FALSE"], ["not a bool", "yes"]),
        (ParameterType.GUID, [uuid.uuid4(), str(uuid.uuid4())], ["not a guid"]),
        (ParameterType.URI, ["https://example.com", AnyUrl("https://example.com/path")], ["not a url", 42]),
        (
            ParameterType.EMAIL,
            ["jane.doe@acme.io", "Jane.Doe@Acme.io", "user@example.test", "ops@intranet"],
            ["not an email", "Jane <jane.doe@acme.io>", " jane.doe@acme.io ", "jane.doe@acme.io\n", 5],
        ),
        (ParameterType.PHONE_NUMBER, ["+1234567890", "(123) 456-7890"], ["not a phone", "1234", "        ", 12345678]),
        (ParameterType.ENUM, [Severity.HIGH], ["HIGH", "not an enum", 2]),
    ],
)
def test_type_validation(param_type: ParameterType, accepted: list[object], rejected: list[object]) -> None:
    """Each type accepts its native type or parsable strings and rejects the rest."""
    p = param(param_type)
    for value in accepted:
        assert p.validate_value(value), f"{param_type} should accept {value!r}"
    for value in rejected:
        assert not p.validate_value(value), f"{param_type} should reject {value!r}"


@pytest.mark.parametrize("param_type", list(ParameterType))
def test_none_is_never_accepted(param_type: ParameterType) -> None:
    """None fails validation for every parameter type."""
    assert not param(param_type).validate_value(None)


def test_enum_rejects_matching_string() -> None:
    """Enum parameters need a member; the member's name as a string is rejected."""
    p = param(ParameterType.ENUM)
    assert p.validate_value(Severity.LOW)
    assert not p.validate_value("LOW")


# ═════════════════════════════════════════════════════════════════════════════
# Formatting
# ═════════════════════════════════════════════════════════════════════════════


def test_format_valid_value() -> None:
    """format stringifies valid values."""
    assert ParameterDescriptor("count", ParameterType.INTEGER).format(123) == "123"
    assert ParameterDescriptor("flag", ParameterType.BOOLEAN).format(True) == "True"


def test_format_enum_uses_member_name() -> None:
    """Enum members format as their bare name, not 'Class.MEMBER'."""
    assert ParameterDescriptor("level", ParameterType.ENUM).format(Severity.HIGH) == "HIGH"


def test_format_str_enum_as_string_keeps_value() -> None:
    """A StrEnum passed to a String parameter formats as its string value."""
    class Color(StrEnum):
        RED = "red"

    assert ParameterDescriptor("color", ParameterType.STRING).format(Color.RED) == "red"


def test_format_invalid_value_raises() -> None:
    """format raises InvalidArgument carrying name and type."""
    p = ParameterDescriptor("count", ParameterType.INTEGER)
    with pytest.raises(InvalidArgument) as exc_info:
        p.format("not an integer")

    err = exc_info.value
    assert err.parameter_name == "count"
    assert err.expected_type == "Integer"
    assert err.code == ErrorCode.INVALID_ARGUMENT
    assert isinstance(err, ValueError)


# ═════════════════════════════════════════════════════════════════════════════
# Model behaviour
# ═════════════════════════════════════════════════════════════════════════════


def test_descriptor_is_frozen() -> None:
    """Descriptors cannot be mutated after construction."""
    p = ParameterDescriptor("name", ParameterType.STRING)
    with pytest.raises(ValidationError):
        p.name = "other"  # type: ignore[misc]


def test_descriptor_requires_name() -> None:
    """Empty names are rejected."""
    with pytest.raises(ValidationError):
        ParameterDescriptor("", ParameterType.STRING)


def test_descriptor_equality_and_str() -> None:
    """Descriptors compare structurally and render as 'name: Type'."""
    a = ParameterDescriptor("name", ParameterType.STRING)
    b = ParameterDescriptor(name="name", type=ParameterType.STRING)
    assert a == b
    assert hash(a) == hash(b)
    assert str(a) == "name: String"
