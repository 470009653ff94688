"""ValidationMessage: one formatted failure tied to its MessageKeyDefinition."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict

from ..errors import ArgumentMismatch
from .definition import MessageKeyDefinition


class ValidationMessage(BaseModel):
    """Immutable failure record. Build through ``create`` so arguments get validated.

    Example:
        >>> key = MessageKeyDefinition.create("age.too_low").with_int_parameter("min")
        >>> msg = ValidationMessage.create(key, 18)
        >>> msg.parameters
        ('18',)
        >>> msg.render()
        'ValidationKey: age.too_low Parameters: 18'
    """

    model_config = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

    key_definition: MessageKeyDefinition
    translation_key: str
    parameters: tuple[str, ...] = ()

    @classmethod
    def create(cls, key_definition: MessageKeyDefinition, *args: object) -> Self:
        """Validate and format args against the definition.

        Raises:
            ArgumentMismatch: If args don't match the definition's parameters
        """
        if key_definition is None:
            raise TypeError("key_definition must not be None")
        if not key_definition.validate_arguments(args):
            raise ArgumentMismatch(key_definition.key, key_definition.parameters, len(args))
        return cls(
            key_definition=key_definition,
            translation_key=key_definition.display_key,
            parameters=tuple(key_definition.format_arguments(args)),
        )

    def render(self) -> str:
        """Human-readable diagnostic with template braces escaped."""
        if self.parameters:
            joined = ", ".join(self.parameters).replace("{", "{{").replace("}", "}}")
            return f"ValidationKey: {self.translation_key} Parameters: {joined}"
        return f"ValidationKey: {self.translation_key}"

    def __str__(self) -> str:
        return self.render()

    def __hash__(self) -> int:
        return hash((self.key_definition.key, self.translation_key, self.parameters))
