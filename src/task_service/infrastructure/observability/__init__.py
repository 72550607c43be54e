from .logger_factory_service import LoggerFactoryService, configure_logging, get_logger

__all__ = [
    "LoggerFactoryService",
    "configure_logging",
    "get_logger",
]
