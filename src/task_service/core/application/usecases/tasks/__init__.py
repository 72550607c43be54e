from task_service.core.application.usecases.tasks.task_commands import (
    CreateTaskCommand,
    UpdateTaskCommand,
)
from task_service.core.application.usecases.tasks.task_handler import TaskHandler
from task_service.core.application.usecases.tasks.task_request_validator import (
    TaskRequestValidator,
)

__all__ = ["CreateTaskCommand", "TaskHandler", "TaskRequestValidator", "UpdateTaskCommand"]
