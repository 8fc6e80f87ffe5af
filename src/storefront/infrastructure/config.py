"""Application configuration: environment-driven settings via pydantic-settings.

Settings are read from environment variables (case-insensitive) and an
optional ``.env`` file. ``get_settings()`` is cached: one instance per
process. Tests that change the environment call ``get_settings.cache_clear()``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./storefront.db"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but we need asyncpg."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # API
    api_title: str = "Storefront API"

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
