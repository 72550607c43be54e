from task_service.core.application.ports.common.exceptions.infra_error import InfraError


class RepositoryError(InfraError):
    """Raised by repository implementations when the backing store fails or times out."""

    def __init__(self, message: str, *, operation: str, task_id: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.task_id = task_id
