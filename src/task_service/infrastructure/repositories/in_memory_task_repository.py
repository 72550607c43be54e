from uuid import UUID

from task_service.core.application.ports import TaskRepositoryPort
from task_service.core.domain.task import Task
from task_service.infrastructure.common.concurrency.read_write_lock import ReadWriteLock
from task_service.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


class InMemoryTaskRepository(TaskRepositoryPort):
    """
    Process-local task registry.

    Reads share the lock, mutations take it exclusively for a single dict
    operation. Stored Task entities are frozen, so a reader never sees a
    half-written record.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._tasks: dict[UUID, Task] = {}

    def create(self, task: Task) -> None:
        with self._lock.write_locked():
            self._tasks[task.id] = task
        logger.debug("Task stored in memory task_id=%s", task.id)

    def find_by_id(self, task_id: UUID) -> Task | None:
        with self._lock.read_locked():
            return self._tasks.get(task_id)

    def find_all(self) -> list[Task]:
        with self._lock.read_locked():
            return list(self._tasks.values())

    def update(self, task_id: UUID, task: Task) -> None:
        with self._lock.write_locked():
            current = self._tasks.get(task_id)
            if current is None:
                return
            # id and created_at stay with the stored record
            self._tasks[task_id] = Task(
                id=current.id,
                title=task.title,
                description=task.description,
                completed=task.completed,
                created_at=current.created_at,
                updated_at=task.updated_at,
            )

    def delete(self, task_id: UUID) -> None:
        with self._lock.write_locked():
            self._tasks.pop(task_id, None)
