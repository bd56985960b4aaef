from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _csv_or_wildcard(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [item.strip() for item in value.split(",")]
    if isinstance(value, list):
        items = [item for item in value if item]
        if items:
            return items
    return ["*"]


class AppSettings(BaseSettings):
    """
    Service settings (metadata, CORS, startup, token and logging).

    Database connection settings live in mailshrimp_api.db.config.Settings.
    """

    APP_NAME: str = "MailShrimp Contacts & Messages API"
    APP_DESCRIPTION: str = (
        "Per-account management of contacts and messages. Every operation is "
        "scoped to the account resolved from the request token."
    )
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: Optional[str] = Field(default=None, description="dev/test/prod label")

    CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed origins, comma-separated or a JSON array",
    )
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_HEADERS: List[str] = Field(default_factory=lambda: ["*"])

    RUN_MIGRATIONS_ON_STARTUP: bool = Field(
        default=True, description="Run `alembic upgrade head` when the app starts"
    )

    JWT_SECRET_KEY: str = Field(default="change-me", description="HMAC secret for access tokens")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    TOKEN_HEADER: str = Field(default="x-access-token", description="Header carrying the access token")

    LOG_LEVEL: str = Field(default="INFO", description="Root log level name")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        return _csv_or_wildcard(value)


# PUBLIC_INTERFACE
def get_app_settings() -> AppSettings:
    """Read AppSettings from the environment (uncached, so tests can patch env vars)."""
    return AppSettings()
