from abc import ABC, abstractmethod
from uuid import UUID

from task_service.core.domain.task import Task


class TaskRepositoryPort(ABC):
    """Storage contract for Task records, keyed by id.

    Implementations MUST raise:
        - RepositoryError: when the backing store fails or times out.

    ``update`` and ``delete`` are permissive: targeting an absent id is a
    successful no-op. Callers that need a "not found" outcome look the task up
    first.
    """

    @abstractmethod
    def create(self, task: Task) -> None:
        """Inserts a new record keyed by ``task.id``. The id must be fresh."""

    @abstractmethod
    def find_by_id(self, task_id: UUID) -> Task | None:
        """Returns the record, or ``None`` when no record has this id."""

    @abstractmethod
    def find_all(self) -> list[Task]:
        """Returns every record currently held. Order is unspecified."""

    @abstractmethod
    def update(self, task_id: UUID, task: Task) -> None:
        """Replaces the mutable fields of the record. No-op when absent."""

    @abstractmethod
    def delete(self, task_id: UUID) -> None:
        """Removes the record permanently. No-op when absent."""
