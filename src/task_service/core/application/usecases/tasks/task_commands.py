from dataclasses import dataclass


@dataclass(frozen=True)
class CreateTaskCommand:
    title: str
    description: str


@dataclass(frozen=True)
class UpdateTaskCommand:
    title: str
    description: str
    # None means "leave the stored value unchanged"
    completed: bool | None = None
