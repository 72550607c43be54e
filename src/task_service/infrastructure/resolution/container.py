"""Functional DI container: builds the database backend and the task handler.

Free functions keep the wiring convenient for the app factory and for tests.
"""

from task_service.core.application.ports import DatabasePort
from task_service.core.application.usecases.tasks import TaskHandler
from task_service.infrastructure.configuration.main_settings import Settings, StorageBackend
from task_service.infrastructure.drivers.database.in_memory_database import InMemoryDatabase
from task_service.infrastructure.drivers.database.mongo_database import MongoDatabase
from task_service.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


def build_database(settings: Settings) -> DatabasePort:
    if settings.storage_backend == StorageBackend.MEMORY:
        logger.info("Using in-memory task storage")
        return InMemoryDatabase()

    logger.info(f"Using MongoDB task storage database={settings.mongodb_database}")
    return MongoDatabase.from_settings(settings)


def build_task_handler(database: DatabasePort) -> TaskHandler:
    return TaskHandler(repository=database.task_repository)
