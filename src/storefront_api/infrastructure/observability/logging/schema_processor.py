"""Nests flat structlog events into the storefront log document.

Flat keys with a known prefix are moved into their block, for example
``processing_http_status`` becomes ``processing.http_status``. Blocks are
emitted only when one of their trigger keys is present. Whatever is left
over ends up in ``extra``.
"""

from __future__ import annotations

import os
from typing import Any
from uuid import uuid4

# block name -> (trigger keys, fields taken from the event)
_BLOCKS: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "processing": (("status",), ("status", "http_status", "duration_ms")),
    "context": (("endpoint",), ("endpoint", "method", "client_ip")),
}


def _as_float(value: Any) -> float | None:
    try:
        return None if value is None else float(value)
    except (TypeError, ValueError):
        return None


def _pop_block(event_dict: dict[str, Any], name: str) -> dict[str, Any] | None:
    triggers, fields = _BLOCKS[name]
    if all(f"{name}_{key}" not in event_dict for key in triggers):
        return None
    return {key: event_dict.pop(f"{name}_{key}", None) for key in fields}


def storefront_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    document: dict[str, Any] = {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "storefront-api"),
        "environment": os.environ.get("APP_ENV", "local"),
        "trace_id": event_dict.pop("trace_id", None),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }

    processing = _pop_block(event_dict, "processing")
    if processing is not None:
        processing["duration_ms"] = _as_float(processing["duration_ms"])
        document["processing"] = processing

    document["event"] = {
        "eventId": event_dict.pop("event_id", None) or str(uuid4()),
        "eventType": event_dict.pop("event_type", None),
        "actorId": event_dict.pop("actor_id", None),
    }

    context = _pop_block(event_dict, "context")
    if context is not None:
        document["context"] = context

    if event_dict:
        document["extra"] = dict(event_dict)
    return document
