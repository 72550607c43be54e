from unittest.mock import patch

import pytest
from pydantic import ValidationError

from task_service.core.application.usecases.tasks import TaskHandler
from task_service.infrastructure.configuration.main_settings import Settings, StorageBackend
from task_service.infrastructure.drivers.database.in_memory_database import InMemoryDatabase
from task_service.infrastructure.drivers.database.mongo_database import MongoDatabase
from task_service.infrastructure.resolution.container import build_database, build_task_handler


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.storage_backend == StorageBackend.MONGODB
    assert settings.mongodb_uri == "mongodb://127.0.0.1:27017"
    assert settings.mongodb_database == "tasks"
    assert settings.mongodb_timeout_seconds == 5.0
    assert settings.port == 8080


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("MONGODB_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("APP_ENV", "staging")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == StorageBackend.MEMORY
    assert settings.mongodb_timeout_seconds == 2.5
    assert settings.env == "staging"


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, mongodb_timeout_seconds=0)


def test_build_database_memory():
    settings = Settings(_env_file=None, storage_backend=StorageBackend.MEMORY)
    database = build_database(settings)

    assert isinstance(database, InMemoryDatabase)
    assert isinstance(build_task_handler(database), TaskHandler)


def test_build_database_mongodb_passes_timeouts():
    settings = Settings(
        _env_file=None,
        storage_backend=StorageBackend.MONGODB,
        mongodb_uri="mongodb://db.internal:27017",
        mongodb_timeout_seconds=5,
    )

    with patch("task_service.infrastructure.drivers.database.mongo_database.MongoClient") as client_cls:
        database = build_database(settings)

    assert isinstance(database, MongoDatabase)
    args, kwargs = client_cls.call_args
    assert args == ("mongodb://db.internal:27017",)
    assert kwargs["timeoutMS"] == 5000
    assert kwargs["serverSelectionTimeoutMS"] == 5000
