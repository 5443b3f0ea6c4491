"""Structlog processor that nests storage fields into fixed blocks.

Flat keys such as ``storage_key`` or ``error_type`` are moved into
``context`` and ``error`` sub-dicts so JSON output has a stable shape.
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

import os
from typing import Any


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "toolkicker"),
        "environment": os.environ.get("APP_ENV", "local"),
        "message": event_dict.pop("event", ""),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    storage_key = event_dict.pop("storage_key", None)
    if component is None and storage_key is None:
        return None
    return {"component": component, "storage_key": storage_key}


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
    }


def storage_event_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result = _build_root_fields(event_dict)

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
