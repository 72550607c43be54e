from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from task_service.core.application.ports import TaskRepositoryPort
from task_service.core.application.ports.common.exceptions import RepositoryError
from task_service.core.domain.task import Task
from task_service.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)
from task_service.infrastructure.observability.metrics_service import (
    REPOSITORY_LATENCY_SECONDS,
)

logger = LoggerFactoryService.build_logger(__name__)

_BACKEND = "mongodb"


class MongoTaskRepository(TaskRepositoryPort):
    """
    Task repository over a MongoDB collection.

    Document layout: {_id: str(uuid), title, description, completed, createdAt, updatedAt}.
    Per-call timeouts are configured on the client (see MongoDatabase); every
    PyMongoError, timeouts included, surfaces as RepositoryError.
    """

    def __init__(self, collection: Collection):
        self._collection = collection

    def create(self, task: Task) -> None:
        logger.debug("Creating task in MongoDB task_id=%s", task.id)
        with self._guard("create", task.id):
            self._collection.insert_one(self._to_document(task))

    def find_by_id(self, task_id: UUID) -> Task | None:
        with self._guard("find_by_id", task_id):
            document = self._collection.find_one({"_id": str(task_id)})

        if document is None:
            logger.debug("Task not found in MongoDB task_id=%s", task_id)
            return None
        return self._decode([document])[0]

    def find_all(self) -> list[Task]:
        with self._guard("find_all"):
            documents = list(self._collection.find({}))
        logger.debug("All tasks retrieved from MongoDB count=%s", len(documents))
        return self._decode(documents)

    def update(self, task_id: UUID, task: Task) -> None:
        update = {
            "$set": {
                "title": task.title,
                "description": task.description,
                "completed": task.completed,
                "updatedAt": task.updated_at,
            }
        }
        with self._guard("update", task_id):
            self._collection.update_one({"_id": str(task_id)}, update)

    def delete(self, task_id: UUID) -> None:
        with self._guard("delete", task_id):
            self._collection.delete_one({"_id": str(task_id)})

    @contextmanager
    def _guard(self, operation: str, task_id: UUID | None = None) -> Iterator[None]:
        with REPOSITORY_LATENCY_SECONDS.labels(backend=_BACKEND, operation=operation).time():
            try:
                yield
            except PyMongoError as e:
                logger.error(f"MongoDB {operation} failed task_id={task_id}: {e}")
                raise RepositoryError(
                    f"MongoDB {operation} failed: {e}",
                    operation=operation,
                    task_id=str(task_id) if task_id else None,
                ) from e

    def _decode(self, documents: list[dict[str, Any]]) -> list[Task]:
        try:
            return [self._to_entity(doc) for doc in documents]
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"MongoDB decode failed: {e}")
            raise RepositoryError(f"Failed to decode tasks: {e}", operation="decode") from e

    @staticmethod
    def _to_document(task: Task) -> dict[str, Any]:
        return {
            "_id": str(task.id),
            "title": task.title,
            "description": task.description,
            "completed": task.completed,
            "createdAt": task.created_at,
            "updatedAt": task.updated_at,
        }

    @classmethod
    def _to_entity(cls, document: dict[str, Any]) -> Task:
        return Task(
            id=UUID(str(document["_id"])),
            title=str(document.get("title") or ""),
            description=str(document.get("description") or ""),
            completed=bool(document.get("completed", False)),
            created_at=cls._as_utc(document["createdAt"]),
            updated_at=cls._as_utc(document["updatedAt"]),
        )

    @staticmethod
    def _as_utc(value: datetime) -> datetime:
        # Clients built without tz_aware=True return naive UTC datetimes
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
