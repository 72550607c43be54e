from enum import StrEnum

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageBackend(StrEnum):
    MEMORY = "memory"
    MONGODB = "mongodb"


class AppSettings(BaseSettings):
    # App Config
    app_name: str = "Task Service"
    env: str = Field(default="local", validation_alias=AliasChoices("APP_ENV", "env"))
    log_level: str = "INFO"

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8080

    # Storage
    storage_backend: StorageBackend = Field(default=StorageBackend.MONGODB)
    mongodb_uri: str = Field(default="mongodb://127.0.0.1:27017", description="MongoDB connection URI")
    mongodb_database: str = "tasks"
    mongodb_collection: str = "tasks"
    mongodb_timeout_seconds: float = Field(
        default=5.0, gt=0, description="Per-operation and server selection timeout"
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
