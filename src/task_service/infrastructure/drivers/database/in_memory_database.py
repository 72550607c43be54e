from task_service.core.application.ports import DatabasePort
from task_service.infrastructure.repositories.in_memory_task_repository import (
    InMemoryTaskRepository,
)


class InMemoryDatabase(DatabasePort):
    """Reference backend for local runs and tests. Nothing to connect to."""

    def __init__(self, repository: InMemoryTaskRepository | None = None):
        self._repository = repository or InMemoryTaskRepository()

    def ping(self) -> None:
        return

    def disconnect(self) -> None:
        return

    @property
    def task_repository(self) -> InMemoryTaskRepository:
        return self._repository
