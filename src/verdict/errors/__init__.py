"""Exceptions for programmer errors.

- ErrorCode: classification of library exceptions
- ArgumentMismatch: arguments don't fit a MessageKeyDefinition
- InvalidArgument: a value doesn't fit a ParameterDescriptor
- OutcomeError: a failing Outcome was forced into a value
"""

from .errors import ArgumentMismatch, ErrorCode, InvalidArgument, OutcomeError, VerdictError

__all__ = ["ErrorCode", "VerdictError", "ArgumentMismatch", "InvalidArgument", "OutcomeError"]
