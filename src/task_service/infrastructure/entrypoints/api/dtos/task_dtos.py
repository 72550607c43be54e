from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

# Request bodies follow proto3 JSON semantics: absent or null strings decode to "",
# unknown fields and wrong types are rejected.


class _TaskRequestDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: StrictStr = ""
    description: StrictStr = ""

    @field_validator("title", "description", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class CreateTaskRequestDTO(_TaskRequestDTO):
    pass


class UpdateTaskRequestDTO(_TaskRequestDTO):
    completed: StrictBool | None = None


class TaskDTO(BaseModel):
    id: str
    title: str
    description: str
    completed: bool
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")


class GetTaskResponseDTO(BaseModel):
    task: TaskDTO


class ListTasksResponseDTO(BaseModel):
    tasks: list[TaskDTO] = []
