"""
Prefect flows for exploring bike-share networks.

Each flow loads what it needs from the CityBikes API, runs the analysis
layer and returns a finished view. Typed errors are turned into error views
here, so callers always get something they can render.

Tasks make a single attempt (no Prefect retries) and keep nothing on disk:
a failed request is reported, not repeated, and every run starts fresh.

Run locally:
    python -m bikeshare_explorer.flows.explore oslo
"""

from __future__ import annotations

import logging
import sys

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from bikeshare_explorer.analysis.aggregate import aggregate_stations
from bikeshare_explorer.analysis.search import in_country
from bikeshare_explorer.analysis.views import (
    CountryStationsView,
    DirectoryView,
    StationsView,
    build_country_view,
    build_directory_view,
    build_stations_view,
    country_error_view,
    directory_error_view,
    empty_country_view,
    stations_error_view,
)
from bikeshare_explorer.config import get_settings
from bikeshare_explorer.datasources import citybikes
from bikeshare_explorer.errors import BikeshareError
from bikeshare_explorer.schemas import AggregationResult, DirectorySnapshot, Network, Station

logger = logging.getLogger(__name__)


# =============================================================================
# Tasks
# =============================================================================


@task(name="load-directory", cache_policy=NO_CACHE, persist_result=False)
def load_directory() -> DirectorySnapshot:
    """Fetch and normalize the network directory."""
    return citybikes.fetch_directory()


@task(name="load-network-stations", cache_policy=NO_CACHE, persist_result=False)
def load_network_stations(network_id: str) -> list[Station]:
    """Fetch the stations of one network."""
    return citybikes.fetch_stations(network_id)


@task(name="load-country-stations", cache_policy=NO_CACHE, persist_result=False)
def load_country_stations(
    candidates: list[Network],
    max_networks: int,
    max_workers: int | None = None,
) -> AggregationResult:
    """Fetch stations from up to ``max_networks`` candidates concurrently."""
    return aggregate_stations(
        candidates,
        max_networks,
        fetch=citybikes.fetch_stations,
        max_workers=max_workers,
    )


# =============================================================================
# Flows
# =============================================================================


@flow(name="search-networks", log_prints=True)
def search_networks(query: str = "") -> DirectoryView:
    """Load the directory and filter it by ``query``."""
    settings = get_settings()
    try:
        snapshot = load_directory()
    except BikeshareError as exc:
        logger.error("Directory load failed: %s", exc)
        return directory_error_view(query, exc)

    return build_directory_view(snapshot, query, display_limit=settings.network_display_limit)


@flow(name="network-stations", log_prints=True)
def network_stations(network_id: str) -> StationsView:
    """Load the stations of a single network."""
    settings = get_settings()
    try:
        stations = load_network_stations(network_id)
    except BikeshareError as exc:
        logger.error("Station load failed for %s: %s", network_id, exc)
        return stations_error_view(network_id, exc)

    return build_stations_view(network_id, stations, display_limit=settings.station_display_limit)


@flow(name="country-stations", log_prints=True)
def country_stations(country_code: str, max_networks: int | None = None) -> CountryStationsView:
    """
    Load stations from every network in a country (up to the fan-out cap).

    Args:
        country_code: ISO 3166-1 alpha-2 code, any case.
        max_networks: Override for ``Settings.max_networks_to_query``.
    """
    settings = get_settings()
    try:
        snapshot = load_directory()
    except BikeshareError as exc:
        logger.error("Directory load failed: %s", exc)
        return country_error_view(country_code, exc)

    candidates = in_country(snapshot.networks, country_code)
    if not candidates:
        return empty_country_view(country_code)

    result = load_country_stations(
        candidates,
        max_networks or settings.max_networks_to_query,
        settings.max_workers,
    )
    return build_country_view(
        country_code,
        result,
        display_limit=settings.country_station_display_limit,
    )


if __name__ == "__main__":
    view = search_networks(" ".join(sys.argv[1:]))
    print(f"Flow complete: {view.total_matches} matching networks")
