"""
Tests for application settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from bikeshare_explorer.config import CITYBIKES_API, Settings, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.api_base_url == CITYBIKES_API == "https://api.citybik.es/v2"
        assert settings.network_display_limit == 60
        assert settings.station_display_limit == 50
        assert settings.country_station_display_limit == 200
        assert settings.max_networks_to_query == 12
        assert settings.max_workers is None

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BIKESHARE_MAX_NETWORKS_TO_QUERY", "5")
        monkeypatch.setenv("BIKESHARE_API_BASE_URL", "http://localhost:8080/v2")

        settings = get_settings()

        assert settings.max_networks_to_query == 5
        assert settings.api_base_url == "http://localhost:8080/v2"

    def test_rejects_zero_cap(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BIKESHARE_MAX_NETWORKS_TO_QUERY", "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
