"""Request-handling core for the task API.

Each operation decodes its identifier, validates its input, calls exactly one
repository mutation and maps failures onto the TaskApplicationError hierarchy.
Validation and parsing failures never reach the repository.
"""

from uuid import UUID

import structlog

from task_service.core.application.exceptions import (
    BadRequestError,
    InternalError,
    TaskNotFoundError,
)
from task_service.core.application.ports import TaskRepositoryPort
from task_service.core.application.ports.common.exceptions import RepositoryError
from task_service.core.application.usecases.tasks.task_commands import (
    CreateTaskCommand,
    UpdateTaskCommand,
)
from task_service.core.application.usecases.tasks.task_request_validator import (
    TaskRequestValidator,
)
from task_service.core.domain.shared.clock import Clock, utc_now
from task_service.core.domain.task import Task

logger = structlog.get_logger()


class TaskHandler:
    def __init__(self, repository: TaskRepositoryPort, clock: Clock = utc_now) -> None:
        self._repository = repository
        self._clock = clock

    def list_tasks(self) -> list[Task]:
        logger.info("Fetching all tasks")
        try:
            tasks = self._repository.find_all()
        except RepositoryError as exc:
            self._log_repository_failure("Failed to retrieve tasks from database", exc)
            raise InternalError("Failed to retrieve tasks") from exc

        logger.info("Successfully retrieved tasks", count=len(tasks))
        return tasks

    def create_task(self, command: CreateTaskCommand) -> Task:
        logger.info("Creating new task")
        TaskRequestValidator.validate(command.title, command.description)

        task = Task.new(command.title, command.description, self._clock())
        try:
            self._repository.create(task)
        except RepositoryError as exc:
            self._log_repository_failure("Failed to create task in database", exc, task.id)
            raise InternalError("Failed to create task") from exc

        logger.info("Task created successfully", task_id=str(task.id), title=task.title)
        return task

    def get_task(self, raw_id: str) -> Task:
        task_id = self.parse_task_id(raw_id)
        logger.info("Fetching task by ID", task_id=str(task_id))

        task = self._find_existing(task_id)
        logger.info("Task retrieved successfully", task_id=str(task_id))
        return task

    def update_task(self, raw_id: str, command: UpdateTaskCommand) -> Task:
        task_id = self.parse_task_id(raw_id)
        logger.info("Updating task", task_id=str(task_id))
        TaskRequestValidator.validate(command.title, command.description)

        current = self._find_existing(task_id)
        updated = current.with_changes(
            title=command.title,
            description=command.description,
            completed=command.completed,
            now=self._clock(),
        )
        try:
            self._repository.update(task_id, updated)
        except RepositoryError as exc:
            self._log_repository_failure("Failed to update task in database", exc, task_id)
            raise InternalError("Failed to update task") from exc

        logger.info("Task updated successfully", task_id=str(task_id), title=updated.title)
        return updated

    def delete_task(self, raw_id: str) -> None:
        task_id = self.parse_task_id(raw_id)
        logger.info("Deleting task", task_id=str(task_id))

        # The repository delete is a no-op on absent ids, so existence is checked here.
        self._find_existing(task_id)
        try:
            self._repository.delete(task_id)
        except RepositoryError as exc:
            self._log_repository_failure("Failed to delete task from database", exc, task_id)
            raise InternalError("Failed to delete task") from exc

        logger.info("Task deleted successfully", task_id=str(task_id))

    @staticmethod
    def parse_task_id(raw_id: str) -> UUID:
        try:
            return UUID(raw_id)
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning("Invalid task ID format", raw_id=raw_id)
            raise BadRequestError(
                "Invalid task ID format", context={"raw_id": raw_id}
            ) from exc

    def _find_existing(self, task_id: UUID) -> Task:
        try:
            task = self._repository.find_by_id(task_id)
        except RepositoryError as exc:
            self._log_repository_failure("Failed to retrieve task from database", exc, task_id)
            raise InternalError("Failed to retrieve task") from exc

        if task is None:
            logger.info("Task not found", task_id=str(task_id))
            raise TaskNotFoundError("Task not found", context={"task_id": str(task_id)})
        return task

    @staticmethod
    def _log_repository_failure(
        message: str, exc: RepositoryError, task_id: UUID | None = None
    ) -> None:
        logger.error(
            message,
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=str(exc),
            error_retryable=False,
            operation=exc.operation,
            task_id=str(task_id) if task_id else None,
        )
