from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RateLimitSettings(BaseSettings):
    rate_limit_enabled: bool = Field(default=True)
    rate_limit_general_max: int = Field(default=1000, ge=1)
    rate_limit_general_window_seconds: int = Field(default=15 * 60, ge=1)
    rate_limit_auth_max: int = Field(default=50, ge=1)
    rate_limit_auth_window_seconds: int = Field(default=15 * 60, ge=1)
    rate_limit_order_max: int = Field(default=10, ge=1)
    rate_limit_order_window_seconds: int = Field(default=60, ge=1)
    rate_limit_admin_max: int = Field(default=100, ge=1)
    rate_limit_admin_window_seconds: int = Field(default=5 * 60, ge=1)
    rate_limit_search_max: int = Field(default=200, ge=1)
    rate_limit_search_window_seconds: int = Field(default=60, ge=1)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
