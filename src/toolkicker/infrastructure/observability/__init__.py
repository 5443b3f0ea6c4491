from .logger_factory_service import configure_logging, get_logger, resolve_log_format

__all__ = [
    "configure_logging",
    "get_logger",
    "resolve_log_format",
]
