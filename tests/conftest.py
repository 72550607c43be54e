from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from task_service.core.application.usecases.tasks import TaskHandler
from task_service.infrastructure.configuration.main_settings import Settings, StorageBackend
from task_service.infrastructure.drivers.database.in_memory_database import InMemoryDatabase
from task_service.infrastructure.entrypoints.api.app_factory import create_app
from task_service.infrastructure.repositories.in_memory_task_repository import (
    InMemoryTaskRepository,
)


class SteppingClock:
    """Deterministic clock: every call advances by one second."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def settings():
    return Settings(
        app_name="TestTaskService",
        env="test",
        storage_backend=StorageBackend.MEMORY,
        _env_file=None,
    )


@pytest.fixture
def repository():
    return InMemoryTaskRepository()


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def handler(repository, clock):
    return TaskHandler(repository=repository, clock=clock)


@pytest.fixture
def database(repository):
    return InMemoryDatabase(repository)


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
