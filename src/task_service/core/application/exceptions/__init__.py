from task_service.core.application.exceptions.task_exceptions import (
    BadRequestError,
    FieldViolation,
    InternalError,
    TaskApplicationError,
    TaskNotFoundError,
    TaskValidationError,
    UnauthorizedError,
)

__all__ = [
    "BadRequestError",
    "FieldViolation",
    "InternalError",
    "TaskApplicationError",
    "TaskNotFoundError",
    "TaskValidationError",
    "UnauthorizedError",
]
