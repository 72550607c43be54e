from enum import StrEnum

from pydantic import BaseModel


class ErrorType(StrEnum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"


class ValidationErrorDetailDTO(BaseModel):
    field: str
    message: str


class ErrorResponseDTO(BaseModel):
    type: ErrorType
    message: str
    details: list[ValidationErrorDetailDTO] | None = None
