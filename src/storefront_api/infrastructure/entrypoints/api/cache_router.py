from fastapi import APIRouter, Depends

from storefront_api.core.domain.shared import utc_now
from storefront_api.infrastructure.entrypoints.api.dependencies import (
    admin_rate_limit,
    get_container,
    require_admin,
)
from storefront_api.infrastructure.entrypoints.api.envelope import success_response
from storefront_api.infrastructure.resolution import Container

KEY_SAMPLE_SIZE = 10

router = APIRouter(
    prefix="/admin/cache",
    tags=["cache"],
    dependencies=[Depends(require_admin), Depends(admin_rate_limit)],
)


@router.get("/stats")
def cache_stats(container: Container = Depends(get_container)):
    cache = container.cache
    keys = cache.keys()
    return success_response(
        "Cache statistics retrieved successfully",
        {
            "statistics": cache.stats(),
            "health": cache.health_check(),
            "configuration": cache.config(),
            "keys": {"total": len(keys), "sample": keys[:KEY_SAMPLE_SIZE]},
        },
    )


@router.post("/flush")
def flush_cache(container: Container = Depends(get_container)):
    container.cache.flush()
    return success_response(
        "Cache flushed successfully", {"flushed": True, "timestamp": utc_now()}
    )
