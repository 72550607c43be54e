from __future__ import annotations

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from task_service.core.application.ports import DatabasePort
from task_service.core.application.ports.common.exceptions import RepositoryError
from task_service.infrastructure.configuration.main_settings import Settings
from task_service.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)
from task_service.infrastructure.repositories.mongo_task_repository import (
    MongoTaskRepository,
)

logger = LoggerFactoryService.build_logger(__name__)


class MongoDatabase(DatabasePort):
    """
    Owns the MongoClient. The client connects lazily; ping() is the explicit
    connectivity check performed at startup.
    """

    def __init__(self, client: MongoClient, database_name: str, collection_name: str = "tasks"):
        self._client = client
        self._database = client[database_name]
        self._task_repository = MongoTaskRepository(self._database[collection_name])

    @classmethod
    def from_settings(cls, settings: Settings) -> MongoDatabase:
        timeout_ms = int(settings.mongodb_timeout_seconds * 1000)
        client: MongoClient = MongoClient(
            settings.mongodb_uri,
            timeoutMS=timeout_ms,
            serverSelectionTimeoutMS=timeout_ms,
            tz_aware=True,
        )
        logger.info(
            f"MongoDB client configured database={settings.mongodb_database} "
            f"timeout_ms={timeout_ms}"
        )
        return cls(client, settings.mongodb_database, settings.mongodb_collection)

    def ping(self) -> None:
        try:
            self._client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Failed to ping MongoDB: {e}")
            raise RepositoryError(f"Failed to ping MongoDB: {e}", operation="ping") from e

    def disconnect(self) -> None:
        self._client.close()
        logger.info("MongoDB client closed")

    @property
    def task_repository(self) -> MongoTaskRepository:
        return self._task_repository
