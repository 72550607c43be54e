from abc import ABC, abstractmethod

from task_service.core.application.ports.task_repository_port import TaskRepositoryPort


class DatabasePort(ABC):
    """Connectivity lifecycle around the task repository. Used only at startup/shutdown."""

    @abstractmethod
    def ping(self) -> None:
        """Raises RepositoryError when the store is unreachable."""

    @abstractmethod
    def disconnect(self) -> None:
        """Releases the connection. Safe to call once at shutdown."""

    @property
    @abstractmethod
    def task_repository(self) -> TaskRepositoryPort:
        """The repository bound to this connection."""
