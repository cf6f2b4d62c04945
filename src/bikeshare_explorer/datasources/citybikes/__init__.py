"""CityBikes bike-share directory data source.

Fetches the network directory and per-network station availability from the
CityBikes API (free, no API key).

Public API:
  - client: API paths, ``get_json`` (single attempt, typed errors)
  - directory: normalize, parse_directory, fetch_directory
  - stations: parse_stations, fetch_stations
"""

from bikeshare_explorer.datasources.citybikes.client import NETWORKS_PATH, get_json, network_path
from bikeshare_explorer.datasources.citybikes.directory import (
    fetch_directory,
    normalize,
    parse_directory,
)
from bikeshare_explorer.datasources.citybikes.stations import fetch_stations, parse_stations

__all__ = [
    "NETWORKS_PATH",
    "fetch_directory",
    "fetch_stations",
    "get_json",
    "network_path",
    "normalize",
    "parse_directory",
    "parse_stations",
]
