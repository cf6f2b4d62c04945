"""Station list for a single network (``GET /networks/{id}``)."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from bikeshare_explorer.datasources.citybikes import client
from bikeshare_explorer.errors import MalformedNetworkDetail
from bikeshare_explorer.schemas import Station

logger = logging.getLogger(__name__)

# =============================================================================
# Parsing
# =============================================================================


def _parse_station(raw: Any) -> Station | None:
    """Parse a single station record. Returns None if it is not usable."""
    if not isinstance(raw, dict):
        return None
    try:
        return Station.model_validate(raw)
    except ValidationError as exc:
        logger.debug("Dropping malformed station %r: %s", raw.get("name"), exc)
        return None


def parse_stations(network_id: str, payload: Any) -> list[Station]:
    """
    Extract ``network.stations`` from a network detail payload.

    Station order is preserved. Entries that are not objects are dropped;
    a missing or non-list collection is an error.

    Raises:
        MalformedNetworkDetail: ``network`` or ``network.stations`` is missing.
    """
    network = payload.get("network") if isinstance(payload, dict) else None
    raw_stations = network.get("stations") if isinstance(network, dict) else None
    if not isinstance(raw_stations, list):
        msg = f"Network {network_id!r} response has no station collection"
        raise MalformedNetworkDetail(msg, network_id=network_id)

    stations: list[Station] = []
    for raw in raw_stations:
        parsed = _parse_station(raw)
        if parsed is not None:
            stations.append(parsed)

    dropped = len(raw_stations) - len(stations)
    if dropped:
        logger.warning("Dropped %d non-object station(s) from network %s", dropped, network_id)
    return stations


# =============================================================================
# API Fetching
# =============================================================================


def fetch_stations(network_id: str) -> list[Station]:
    """
    Fetch the stations of exactly one network.

    Issues a single request. Failures are raised, never replaced with an
    empty list, so the caller can tell "no stations" from "could not load".

    Raises:
        FetchError: Transport failure or non-success status.
        MalformedNetworkDetail: Payload lacks ``network.stations``.
    """
    payload = client.get_json(client.network_path(network_id))
    return parse_stations(network_id, payload)
