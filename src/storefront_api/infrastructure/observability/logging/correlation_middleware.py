"""Request-scoped log context for the storefront API.

Every HTTP request gets a correlation id (taken from ``X-Correlation-ID`` when
the client sends one) and a fresh trace id. Both are bound to structlog
contextvars together with the path, method and client address, the
correlation id is echoed on the response, and one "Request processed" line
is written when the response is done.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

CORRELATION_HEADER = b"x-correlation-id"

logger = structlog.get_logger()


class CorrelationMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        clear_contextvars()
        correlation_id = _request_header(scope, CORRELATION_HEADER) or str(uuid4())
        client = scope.get("client")
        bind_contextvars(
            correlation_id=correlation_id,
            trace_id=str(uuid4()),
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
            context_client_ip=client[0] if client else None,
        )

        status_code = 500
        started = time.perf_counter()

        async def send_tagged(message: dict[str, Any]) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message.get("status", 500)
                message = {
                    **message,
                    "headers": [
                        *message.get("headers", []),
                        (CORRELATION_HEADER, correlation_id.encode("latin-1")),
                    ],
                }
            await send(message)

        try:
            await self.app(scope, receive, send_tagged)
        finally:
            await logger.ainfo(
                "Request processed",
                processing_status="SUCCESS" if status_code < 400 else "ERROR",
                processing_http_status=status_code,
                processing_duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )


def _request_header(scope: dict[str, Any], name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None
