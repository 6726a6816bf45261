from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_SECRET_LENGTH = 32


class AuthSettings(BaseSettings):
    jwt_secret: SecretStr = Field(..., description="HMAC key used to sign access tokens")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expires_in_hours: int = Field(default=24, ge=1)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def has_weak_secret(self) -> bool:
        return len(self.jwt_secret.get_secret_value()) < MIN_SECRET_LENGTH
