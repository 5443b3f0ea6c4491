"""Logging setup for the stores and adapters.

Adapters log through ``get_logger()`` (structlog); the stores and slots in
``core`` use plain ``logging.getLogger()``. Both end up on one stdout
handler rendered by the same processor chain.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from toolkicker.infrastructure.observability.logging.storage_event_processor import (
    storage_event_processor,
)

# Fields that core modules attach through ``extra=`` on stdlib records.
STORAGE_RECORD_FIELDS = ("storage_key", "error_type", "error_details")

_JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})

_CONFIGURED = False


def configure_logging(level: str = "INFO", log_format: str | None = None) -> None:
    """Configure structlog and the stdlib root logger once per process.

    *log_format* is ``json`` or ``console``; when omitted it comes from
    ``LOG_FORMAT`` and then ``APP_ENV``. Later calls are ignored.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    json_output = resolve_log_format(log_format) == "json"
    renderer = _renderer(json_output)
    chain = build_processor_chain(json_output)

    structlog.configure(
        processors=[*chain, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _install_root_handler(build_stdlib_formatter(json_output), level)


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger().bind(context_component=component)


def resolve_log_format(log_format: str | None = None) -> str:
    """Return ``json`` or ``console``. Unknown explicit values fall back to the environment."""
    for candidate in (log_format, os.environ.get("LOG_FORMAT")):
        if candidate and candidate.lower() in ("json", "console"):
            return candidate.lower()
    if os.environ.get("APP_ENV", "local").lower() in _JSON_ENVIRONMENTS:
        return "json"
    return "console"


def build_processor_chain(json_output: bool) -> list[Any]:
    chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        chain.append(storage_event_processor)
    return chain


def build_stdlib_formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    """Formatter for records emitted through ``logging``; keeps their storage ``extra`` fields."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[structlog.stdlib.ExtraAdder(allow=STORAGE_RECORD_FIELDS)],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *build_processor_chain(json_output),
            _renderer(json_output),
        ],
    )


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _install_root_handler(formatter: logging.Formatter, level: str) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())
