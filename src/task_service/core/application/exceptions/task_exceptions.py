"""Task handler exception hierarchy.

Every handler operation fails with one of these types; the HTTP layer maps
each type to a status code and an error ``type`` without string-matching.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


class TaskApplicationError(Exception):
    """Base exception for all errors reported by the task handler."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class TaskValidationError(TaskApplicationError):
    """A client-supplied field fails a constraint. Carries one violation per field."""

    def __init__(
        self,
        details: list[FieldViolation],
        message: str = "Validation failed",
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.details = details


class BadRequestError(TaskApplicationError):
    """Malformed identifier or request body."""


class TaskNotFoundError(TaskApplicationError):
    """The targeted task does not exist."""


class InternalError(TaskApplicationError):
    """Repository or serialization failure. The message is safe to show to clients."""


class UnauthorizedError(TaskApplicationError):
    """Reserved for an authentication layer; not raised by the task handler."""
