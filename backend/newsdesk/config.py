"""Newsdesk Settings — read once from the environment (or .env) via pydantic-settings.

Invariants:
    - Connection details only ever come from DATABASE_URL, never from code
    - get_settings() is cached, so the module-level app and the lifespan agree
    - log_format is either "json" or "text"; anything else fails at startup

Design Decisions:
    - Bare postgres:// and postgresql:// URLs are accepted and pinned to the
      asyncpg driver, since that is what managed Postgres hosts hand out
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNC_PG_SCHEME = "postgresql+asyncpg://"
_SYNC_PG_SCHEMES = ("postgres://", "postgresql://")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_title: str = "Newsdesk API"

    # Store
    database_url: str = f"{_ASYNC_PG_SCHEME}newsdesk:newsdesk@localhost:5432/newsdesk"
    database_pool_size: int = 10
    database_max_overflow: int = 10
    database_echo: bool = False

    # HTTP
    cors_origins: list[str] = ["http://localhost:5173"]

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def pin_asyncpg_driver(cls, v):
        if not isinstance(v, str):
            return v
        for scheme in _SYNC_PG_SCHEMES:
            if v.startswith(scheme):
                return _ASYNC_PG_SCHEME + v[len(scheme):]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
