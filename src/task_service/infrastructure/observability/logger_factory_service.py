"""Structlog-based logging configuration with the service schema and stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns bound structlog logger
- LoggerFactoryService: stdlib-logger facade for infrastructure modules
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from task_service.infrastructure.observability.logging.service_schema_processor import (
    service_schema_processor,
)

_CONFIGURED = False


def configure_logging(log_level: str | None = None) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Handlers are installed on the first call only; a later call may still
    change the root level (the app factory passes the configured level).
    Renderer is selected by LOG_FORMAT env (json|console) or APP_ENV.
    """
    global _CONFIGURED  # noqa: PLW0603
    if not _CONFIGURED:
        _CONFIGURED = True
        _install_pipeline()

    if log_level:
        logging.getLogger().setLevel(log_level.upper())


def build_shared_processors() -> list[Any]:
    """Processors shared by structlog events and bridged stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        service_schema_processor,
    ]


def _install_pipeline() -> None:
    renderer = _select_renderer()
    shared_processors = build_shared_processors()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: uvicorn, pymongo and module loggers share the pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(logging.INFO)


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger pre-bound with context_component."""
    # bind() materializes the logger, so the pipeline must exist first
    configure_logging()
    return structlog.get_logger().bind(context_component=component)


def _select_renderer() -> Any:
    """Choose renderer based on LOG_FORMAT env or APP_ENV."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)

    env = os.environ.get("APP_ENV", "local").lower()
    if env in ("qa", "staging", "prod", "production"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


class LoggerFactoryService:
    """Stdlib facade. Structlog-native code should prefer get_logger()."""

    @staticmethod
    def build_logger(name: str) -> logging.Logger:
        """Return a stdlib logger (routed through structlog via ProcessorFormatter)."""
        configure_logging()
        return logging.getLogger(name)
