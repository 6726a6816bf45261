from enum import StrEnum
from urllib.parse import urlparse

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE = "ecommerce"


class StorageBackend(StrEnum):
    MONGO = "mongo"
    MEMORY = "memory"


class DatabaseSettings(BaseSettings):
    storage_backend: StorageBackend = Field(default=StorageBackend.MONGO)
    mongodb_uri: str = Field(default="mongodb://localhost:27017/ecommerce")
    mongodb_database: str | None = Field(default=None)
    mongodb_connect_attempts: int = Field(default=3, ge=1)
    mongodb_timeout_ms: int = Field(default=5000, ge=100)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_name(self) -> str:
        """Explicit setting wins, then the path of the URI, then the default."""
        if self.mongodb_database:
            return self.mongodb_database
        path = urlparse(self.mongodb_uri).path.strip("/")
        return path or DEFAULT_DATABASE
