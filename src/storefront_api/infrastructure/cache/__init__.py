from storefront_api.infrastructure.cache.response_cache_service import ResponseCacheService

__all__ = ["ResponseCacheService"]
