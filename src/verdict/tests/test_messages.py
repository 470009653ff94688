"""Tests for ValidationMessage creation and rendering."""

from __future__ import annotations

import pytest

from verdict import ArgumentMismatch, MessageKeyDefinition, ValidationMessage
from verdict.errors import ErrorCode

PERSON = (
    MessageKeyDefinition.create("person.invalid")
    .with_string_parameter("name")
    .with_int_parameter("age")
)


def test_create_formats_parameters() -> None:
    """Arguments are validated and stored as strings."""
    msg = ValidationMessage.create(PERSON, "John", 5)
    assert msg.parameters == ("John", "5")
    assert msg.key_definition == PERSON
    assert msg.translation_key == "person.invalid"


def test_create_rejects_swapped_arguments() -> None:
    """Arguments in the wrong order raise ArgumentMismatch."""
    with pytest.raises(ArgumentMismatch) as exc_info:
        ValidationMessage.create(PERSON, 5, "John")
    assert exc_info.value.code == ErrorCode.ARGUMENT_MISMATCH
    assert exc_info.value.key == "person.invalid"


def test_create_rejects_wrong_count() -> None:
    """Too few or too many arguments raise ArgumentMismatch."""
    with pytest.raises(ArgumentMismatch):
        ValidationMessage.create(PERSON, "John")
    with pytest.raises(ArgumentMismatch):
        ValidationMessage.create(MessageKeyDefinition.create("bare"), "extra")


def test_translation_key_uses_display_key() -> None:
    """translation_key comes from the definition's display key."""
    d = MessageKeyDefinition.create("k", "Shown to translators")
    assert ValidationMessage.create(d).translation_key == "Shown to translators"


def test_render() -> None:
    """render lists the translation key and joined parameters."""
    assert ValidationMessage.create(PERSON, "John", 5).render() == (
        "ValidationKey: person.invalid Parameters: John, 5"
    )
    assert str(ValidationMessage.create(MessageKeyDefinition.create("bare"))) == "ValidationKey: bare"


def test_render_escapes_braces() -> None:
    """Braces in parameters are doubled so the output is template-safe."""
    d = MessageKeyDefinition.create("template").with_string_parameter("raw")
    assert ValidationMessage.create(d, "{x}").render() == "ValidationKey: template Parameters: {{x}}"


def test_messages_are_values() -> None:
    """Messages from equal inputs are equal and hash alike."""
    a = ValidationMessage.create(PERSON, "John", 5)
    b = ValidationMessage.create(PERSON, "John", "5")
    assert a == b
    assert hash(a) == hash(b)
    assert a != ValidationMessage.create(PERSON, "Jane", 5)
