from task_service.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from task_service.infrastructure.observability.logging.service_schema_processor import (
    service_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "service_schema_processor",
]
