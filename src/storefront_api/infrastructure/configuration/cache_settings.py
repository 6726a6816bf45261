from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    cache_enabled: bool = Field(default=True)
    cache_default_ttl: int = Field(default=60, ge=1)
    cache_product_list_ttl: int = Field(default=120, ge=1)
    cache_product_detail_ttl: int = Field(default=300, ge=1)
    cache_search_ttl: int = Field(default=60, ge=1)
    cache_max_keys: int = Field(default=1000, ge=1)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
