from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class MediaSettings(BaseSettings):
    upload_dir: Path = Field(default=Path("./uploads"))
    max_file_size: int = Field(default=10 * 1024 * 1024, ge=1)
    max_files: int = Field(default=5, ge=1)
    cloudinary_cloud_name: str | None = Field(default=None)
    cloudinary_api_key: str | None = Field(default=None)
    cloudinary_api_secret: SecretStr | None = Field(default=None)
    cloudinary_folder: str = Field(default="ecommerce")
    cloudinary_max_attempts: int = Field(default=3, ge=1)
    cloudinary_timeout_seconds: float = Field(default=30.0)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cloudinary_configured(self) -> bool:
        return bool(
            self.cloudinary_cloud_name and self.cloudinary_api_key and self.cloudinary_api_secret
        )
