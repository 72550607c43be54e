from task_service.infrastructure.configuration.app_settings import AppSettings, StorageBackend


class GlobalSettings(AppSettings):
    """
    Master configuration class that aggregates all setting modules.
    Usage:
        settings = GlobalSettings()
    """
    pass


# Short name used by the app factory and tests
Settings = GlobalSettings

__all__ = ["GlobalSettings", "Settings", "StorageBackend"]
