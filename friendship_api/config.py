"""
Runtime configuration helpers for the FastAPI application.

Loads DATABASE_URL, the optional read replica URL and the JWT settings from the
environment or the .env file located in the project root.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from dotenv import load_dotenv
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]

ENV_PATH = BASE_DIR / ".env"

# Load .env defaults without overriding environment variables provided by the platform
load_dotenv(dotenv_path=ENV_PATH, override=False)

_PLACEHOLDER_SECRETS: Final[set[str]] = {
    "changeme",
    "change-me",
    "placeholder",
    "secret",
    "your-key-here",
}


class MissingSecretError(RuntimeError):
    """Raised when a required secret is unset or still holds a placeholder."""


class Settings(BaseSettings):
    # Required; must come from the environment or .env
    database_url: str = Field(..., alias="DATABASE_URL")

    # Dedicated connection for read-only friend queries; falls back to database_url
    read_database_url: str | None = Field(default=None, alias="READ_DATABASE_URL")

    app_name: str = Field(default="Friendship Service", alias="APP_NAME")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")
    cors_origins: str | None = Field(default=None, alias="CORS_ORIGINS")

    jwt_secret_key: SecretStr | None = Field(default=None, alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expires_minutes: int = Field(default=1440, alias="JWT_EXPIRES_MINUTES")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def require_jwt_secret(self) -> str:
        """Return the signing key, refusing empty or placeholder values."""

        value = self.jwt_secret_key.get_secret_value().strip() if self.jwt_secret_key else ""
        if not value or value.lower() in _PLACEHOLDER_SECRETS:
            raise MissingSecretError("JWT_SECRET_KEY must be set to a non-placeholder value")
        return value


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["MissingSecretError", "Settings", "get_settings"]
