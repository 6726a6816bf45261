from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnvironment(StrEnum):
    LOCAL = "local"
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class AppSettings(BaseSettings):
    app_name: str = Field(default="Storefront API")
    app_version: str = Field(default="1.0.0")
    app_env: AppEnvironment = Field(default=AppEnvironment.LOCAL)
    port: int = Field(default=3000)
    base_url: str = Field(default="http://localhost:3000", description="Public base for local image URLs")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.app_env == AppEnvironment.PRODUCTION
