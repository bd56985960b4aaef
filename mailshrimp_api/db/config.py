from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

# Drivers used by the application (async) and by Alembic offline mode (sync).
_ASYNC_DRIVERS = {"postgresql": "postgresql+asyncpg", "sqlite": "sqlite+aiosqlite"}


class Settings(BaseSettings):
    """
    Database connection settings.

    Either POSTGRES_URL (any SQLAlchemy URL) or the POSTGRES_USER /
    POSTGRES_PASSWORD / POSTGRES_DB parts must be provided; host and port
    default to localhost:5432.
    """

    POSTGRES_URL: Optional[str] = Field(default=None, description="Full connection URL; wins over the parts below")
    POSTGRES_USER: Optional[str] = Field(default=None)
    POSTGRES_PASSWORD: Optional[str] = Field(default=None)
    POSTGRES_DB: Optional[str] = Field(default=None)
    POSTGRES_HOST: Optional[str] = Field(default="localhost")
    POSTGRES_PORT: Optional[int] = Field(default=5432)

    SQL_ECHO: bool = Field(default=False, description="Log every SQL statement")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def _url(self) -> URL:
        if self.POSTGRES_URL:
            return make_url(self.POSTGRES_URL)
        missing = [
            name
            for name in ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_DB")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(
                "Database configuration missing: set POSTGRES_URL or " + ", ".join(missing)
            )
        return URL.create(
            "postgresql",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD,
            host=self.POSTGRES_HOST or "localhost",
            port=self.POSTGRES_PORT or 5432,
            database=self.POSTGRES_DB,
        )

    @property
    def database_url(self) -> str:
        """Configured URL, driver left as given."""
        return self._url().render_as_string(hide_password=False)

    @property
    def async_database_url(self) -> str:
        """URL with the async driver for its backend (asyncpg, aiosqlite)."""
        url = self._url()
        driver = _ASYNC_DRIVERS.get(url.get_backend_name(), url.drivername)
        return url.set(drivername=driver).render_as_string(hide_password=False)

    @property
    def sync_database_url(self) -> str:
        """URL with the backend's default driver, for Alembic offline mode."""
        url = self._url()
        return url.set(drivername=url.get_backend_name()).render_as_string(hide_password=False)


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return database settings read from the environment."""
    return Settings()
