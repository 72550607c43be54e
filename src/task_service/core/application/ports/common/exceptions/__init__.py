from task_service.core.application.ports.common.exceptions.domain_error import DomainError
from task_service.core.application.ports.common.exceptions.infra_error import InfraError
from task_service.core.application.ports.common.exceptions.repository_error import (
    RepositoryError,
)

__all__ = ["DomainError", "InfraError", "RepositoryError"]
