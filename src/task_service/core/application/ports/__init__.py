from task_service.core.application.ports.database_port import DatabasePort
from task_service.core.application.ports.task_repository_port import TaskRepositoryPort

__all__ = ["DatabasePort", "TaskRepositoryPort"]
