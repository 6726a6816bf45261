from functools import lru_cache

from storefront_api.infrastructure.configuration.app_settings import AppSettings
from storefront_api.infrastructure.configuration.auth_settings import AuthSettings
from storefront_api.infrastructure.configuration.cache_settings import CacheSettings
from storefront_api.infrastructure.configuration.database_settings import DatabaseSettings
from storefront_api.infrastructure.configuration.media_settings import MediaSettings
from storefront_api.infrastructure.configuration.rate_limit_settings import RateLimitSettings


class Settings(
    AppSettings,
    DatabaseSettings,
    AuthSettings,
    CacheSettings,
    MediaSettings,
    RateLimitSettings,
):
    """
    Combines all settings.
    Every concern reads its own environment variables from the same .env file.
    """


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
