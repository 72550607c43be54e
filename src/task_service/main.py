import uvicorn

from task_service.infrastructure.configuration.main_settings import Settings
from task_service.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Run the development server."""
    settings = Settings()
    uvicorn.run(
        "task_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )

# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
