from collections.abc import Callable, Iterable
from dataclasses import dataclass

from fastapi import Response
from fastapi.responses import JSONResponse

from storefront_api.infrastructure.cache import ResponseCacheService

CACHE_HEADER = "X-Cache"


@dataclass(frozen=True)
class CachedResponse:
    status_code: int
    body: bytes


def cached_response(
    cache: ResponseCacheService,
    key: str,
    ttl: float,
    tags: Iterable[str],
    produce: Callable[[], JSONResponse],
) -> Response:
    """Replays a cached body or renders, stores and returns a fresh one.

    Only 2xx responses are stored. Errors raised by ``produce`` propagate.
    """
    hit = cache.get(key)
    if hit is not None:
        return Response(
            content=hit.body,
            status_code=hit.status_code,
            media_type="application/json",
            headers={CACHE_HEADER: "HIT"},
        )

    response = produce()
    if 200 <= response.status_code < 300:
        cache.set(key, CachedResponse(response.status_code, bytes(response.body)), ttl, tags)
    response.headers[CACHE_HEADER] = "MISS"
    return response
