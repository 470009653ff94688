"""Typed message keys.

- ParameterType / ParameterDescriptor: one typed parameter slot
- MessageKeyDefinition: key + ordered parameters, with fluent builders
- ValidationMessage: a failure whose arguments were checked against its key
"""

from .definition import MessageKeyDefinition
from .message import ValidationMessage
from .parameter import ParameterDescriptor, ParameterType, validator_for

__all__ = [
    "ParameterType",
    "ParameterDescriptor",
    "validator_for",
    "MessageKeyDefinition",
    "ValidationMessage",
]
