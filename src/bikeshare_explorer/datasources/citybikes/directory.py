"""Network directory (``GET /networks``): normalization and fetching."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from bikeshare_explorer.datasources.citybikes import client
from bikeshare_explorer.errors import MalformedDirectory
from bikeshare_explorer.schemas import DirectorySnapshot, Network

logger = logging.getLogger(__name__)

# =============================================================================
# Parsing
# =============================================================================


def _parse_network(raw: Any) -> Network | None:
    """Parse a single directory record. Returns None if it has no usable id."""
    if isinstance(raw, Network):
        return raw
    if not isinstance(raw, Mapping) or not raw.get("id"):
        return None
    try:
        return Network.model_validate(raw)
    except ValidationError as exc:
        logger.debug("Dropping malformed network %r: %s", raw.get("id"), exc)
        return None


def normalize(raw_networks: Iterable[Any] | None) -> list[Network]:
    """
    Drop records without an identity and collapse duplicate ids.

    The first occurrence of each id wins and input order is kept, so
    ``normalize(normalize(x)) == normalize(x)``. Never raises.

    Args:
        raw_networks: Directory records as dicts (or already-parsed
            ``Network`` objects). ``None`` is treated as empty.

    Returns:
        Deduplicated networks in input order.
    """
    if not raw_networks:
        return []

    seen: set[str] = set()
    networks: list[Network] = []
    for raw in raw_networks:
        network = _parse_network(raw)
        if network is None or network.id in seen:
            continue
        seen.add(network.id)
        networks.append(network)
    return networks


def parse_directory(payload: Any) -> DirectorySnapshot:
    """
    Build a snapshot from a raw ``/networks`` response.

    Raises:
        MalformedDirectory: The payload is not an object or its ``networks``
            key is missing or not a list.
    """
    raw_networks = payload.get("networks") if isinstance(payload, dict) else None
    if not isinstance(raw_networks, list):
        msg = "Directory response has no 'networks' list"
        raise MalformedDirectory(msg)

    networks = normalize(raw_networks)
    dropped = len(raw_networks) - len(networks)
    if dropped:
        logger.info("Dropped %d malformed or duplicate network record(s)", dropped)

    return DirectorySnapshot(
        networks=networks,
        raw_count=len(raw_networks),
        dropped_count=dropped,
    )


# =============================================================================
# API Fetching
# =============================================================================


def fetch_directory() -> DirectorySnapshot:
    """
    Load and normalize the full network directory.

    Returns:
        A fresh ``DirectorySnapshot``; the previous one is simply discarded
        by the caller.

    Raises:
        FetchError: Transport failure.
        MalformedDirectory: Response lacks a ``networks`` list.
    """
    return parse_directory(client.get_json(client.NETWORKS_PATH))
