from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_service.core.application.exceptions import (
    BadRequestError,
    InternalError,
    TaskApplicationError,
    TaskNotFoundError,
    TaskValidationError,
    UnauthorizedError,
)
from task_service.infrastructure.entrypoints.api.dtos.error_dtos import (
    ErrorResponseDTO,
    ErrorType,
    ValidationErrorDetailDTO,
)
from task_service.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("api.error_handlers")

# Ordered from most to least specific
_ERROR_MAPPING: list[tuple[type[TaskApplicationError], int, ErrorType]] = [
    (TaskValidationError, status.HTTP_400_BAD_REQUEST, ErrorType.VALIDATION_ERROR),
    (BadRequestError, status.HTTP_400_BAD_REQUEST, ErrorType.BAD_REQUEST),
    (TaskNotFoundError, status.HTTP_404_NOT_FOUND, ErrorType.NOT_FOUND),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED, ErrorType.UNAUTHORIZED),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorType.INTERNAL_ERROR),
]


def error_response(status_code: int, body: ErrorResponseDTO) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def to_error_response(exc: TaskApplicationError) -> JSONResponse:
    for exc_type, status_code, error_type in _ERROR_MAPPING:
        if isinstance(exc, exc_type):
            break
    else:
        status_code, error_type = status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorType.INTERNAL_ERROR

    details = None
    if isinstance(exc, TaskValidationError):
        details = [ValidationErrorDetailDTO(field=d.field, message=d.message) for d in exc.details]

    message = exc.message or "Internal server error"
    return error_response(status_code, ErrorResponseDTO(type=error_type, message=message, details=details))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TaskApplicationError)
    async def task_error_handler(request: Request, exc: TaskApplicationError):
        response = to_error_response(exc)
        logger.info(
            "Task request rejected",
            error_type=type(exc).__name__,
            error_details=exc.message,
            processing_http_status=response.status_code,
            **exc.context,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Body could not be decoded into the request schema
        logger.warning(
            "Invalid JSON format",
            error_type="RequestValidationError",
            error_details=str(exc.errors()),
            context_endpoint=request.url.path,
        )
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            ErrorResponseDTO(type=ErrorType.BAD_REQUEST, message="Invalid JSON format"),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error",
            error_type=type(exc).__name__,
            error_details=str(exc),
            context_endpoint=request.url.path,
            exc_info=exc,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponseDTO(type=ErrorType.INTERNAL_ERROR, message="Internal server error"),
        )
