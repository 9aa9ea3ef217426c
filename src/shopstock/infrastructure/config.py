"""Runtime settings, read from ``SHOPSTOCK_*`` environment variables or ``.env``."""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="SHOPSTOCK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///shopstock.db"
    database_echo: bool = False

    # Reservations (deployment-wide, not per product)
    reservation_ttl_minutes: int = Field(default=15, gt=0)

    # Catalog cache; 0 disables it
    catalog_cache_ttl_seconds: float = Field(default=0, ge=0)

    # Logging
    log_level: str = "INFO"

    @property
    def reservation_ttl(self) -> timedelta:
        return timedelta(minutes=self.reservation_ttl_minutes)


@lru_cache
def get_settings() -> Settings:
    return Settings()
