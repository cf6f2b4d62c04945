"""
Application settings.

Values come from environment variables prefixed with ``BIKESHARE_`` (or a
local ``.env`` file), falling back to the defaults below::

    BIKESHARE_API_BASE_URL=https://api.citybik.es/v2
    BIKESHARE_MAX_NETWORKS_TO_QUERY=12
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bikeshare_explorer.reference.limits import (
    COUNTRY_STATION_DISPLAY_LIMIT,
    MAX_NETWORKS_TO_QUERY,
    NETWORK_DISPLAY_LIMIT,
    STATION_DISPLAY_LIMIT,
)

CITYBIKES_API = "https://api.citybik.es/v2"


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BIKESHARE_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "bikeshare-explorer"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "WARNING"

    api_base_url: str = CITYBIKES_API

    network_display_limit: int = Field(default=NETWORK_DISPLAY_LIMIT, ge=1)
    station_display_limit: int = Field(default=STATION_DISPLAY_LIMIT, ge=1)
    country_station_display_limit: int = Field(default=COUNTRY_STATION_DISPLAY_LIMIT, ge=1)
    max_networks_to_query: int = Field(default=MAX_NETWORKS_TO_QUERY, ge=1)
    max_workers: int | None = Field(default=None, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
