"""Pure ASGI middleware that copies the rate-limit decision onto the response."""

from __future__ import annotations

from typing import Any

from storefront_api.infrastructure.entrypoints.api.dependencies import RATE_LIMIT_STATE_KEY


class RateLimitHeadersMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def _with_headers(message: dict[str, Any]) -> None:
            if message.get("type") == "http.response.start":
                message = _add_headers(scope, message)
            await send(message)

        await self.app(scope, receive, _with_headers)


def _add_headers(scope: dict[str, Any], message: dict[str, Any]) -> dict[str, Any]:
    decided = (scope.get("state") or {}).get(RATE_LIMIT_STATE_KEY)
    if not decided:
        return message
    headers = list(message.get("headers", []))
    present = {key.lower() for key, _ in headers}
    for name, value in decided.items():
        encoded = name.lower().encode("latin-1")
        if encoded not in present:
            headers.append((encoded, value.encode("latin-1")))
    return {**message, "headers": headers}
