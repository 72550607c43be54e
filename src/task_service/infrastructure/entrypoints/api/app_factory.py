from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import make_asgi_app

from task_service.core.application.ports import DatabasePort
from task_service.infrastructure.configuration.main_settings import Settings
from task_service.infrastructure.entrypoints.api.error_handlers import register_exception_handlers
from task_service.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from task_service.infrastructure.entrypoints.api.task_router import router as task_router
from task_service.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
    configure_logging,
)
from task_service.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from task_service.infrastructure.resolution.container import (
    build_database,
    build_task_handler,
)

logger = LoggerFactoryService.build_logger(__name__)

API_PREFIX = "/api/v1"
_ENDPOINTS = (
    "GET    /health",
    f"GET    {API_PREFIX}/tasks",
    f"POST   {API_PREFIX}/tasks",
    f"GET    {API_PREFIX}/tasks/{{id}}",
    f"PUT    {API_PREFIX}/tasks/{{id}}",
    f"DELETE {API_PREFIX}/tasks/{{id}}",
)


def create_app(settings: Settings, database: DatabasePort | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name}")
    logger.info(f"Env: {settings.env}")
    logger.info(f"Storage Backend: {settings.storage_backend.value}")
    logger.info("------------------------")

    if database is None:
        database = build_database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # A failed ping aborts startup
        database.ping()
        logger.info("Storage connectivity verified")
        logger.info("API endpoints:\n  " + "\n  ".join(_ENDPOINTS))
        try:
            yield
        finally:
            database.disconnect()
            logger.info("Storage disconnected")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.database = database
    app.state.task_handler = build_task_handler(database)

    register_exception_handlers(app)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router)
    app.include_router(task_router, prefix=API_PREFIX)
    app.mount("/metrics", make_asgi_app())

    return app
