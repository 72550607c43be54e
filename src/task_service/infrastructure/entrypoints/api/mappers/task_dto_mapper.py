from task_service.core.application.usecases.tasks import CreateTaskCommand, UpdateTaskCommand
from task_service.core.domain.task import Task
from task_service.infrastructure.entrypoints.api.dtos.task_dtos import (
    CreateTaskRequestDTO,
    GetTaskResponseDTO,
    ListTasksResponseDTO,
    TaskDTO,
    UpdateTaskRequestDTO,
)


class TaskDtoMapper:
    """Maps between HTTP DTOs and the handler's commands / domain entities."""

    @staticmethod
    def to_create_command(payload: CreateTaskRequestDTO) -> CreateTaskCommand:
        return CreateTaskCommand(title=payload.title, description=payload.description)

    @staticmethod
    def to_update_command(payload: UpdateTaskRequestDTO) -> UpdateTaskCommand:
        return UpdateTaskCommand(
            title=payload.title,
            description=payload.description,
            completed=payload.completed,
        )

    @staticmethod
    def to_dto(task: Task) -> TaskDTO:
        return TaskDTO(
            id=str(task.id),
            title=task.title,
            description=task.description,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    @classmethod
    def to_single_response(cls, task: Task) -> GetTaskResponseDTO:
        return GetTaskResponseDTO(task=cls.to_dto(task))

    @classmethod
    def to_list_response(cls, tasks: list[Task]) -> ListTasksResponseDTO:
        return ListTasksResponseDTO(tasks=[cls.to_dto(t) for t in tasks])
