"""Free-text network search over a directory snapshot."""

from __future__ import annotations

from collections.abc import Sequence

from bikeshare_explorer.reference.countries import name_of
from bikeshare_explorer.schemas import Network


def matches(network: Network, query: str) -> bool:
    """
    Whether ``network`` matches an already lower-cased ``query``.

    A network matches if its name or city contains the query, its country
    code equals the query exactly, or its country's display name contains it.
    """
    name = (network.name or "").lower()
    city = network.city.lower()
    code = network.country_code
    return (
        query in name
        or query in city
        or code.lower() == query
        or query in name_of(code).lower()
    )


def filter_networks(networks: Sequence[Network], query: str | None) -> list[Network]:
    """
    Case-insensitive multi-field filter. Input order is preserved.

    An empty query returns every network.
    """
    q = (query or "").lower()
    if not q:
        return list(networks)
    return [n for n in networks if matches(n, q)]


def in_country(networks: Sequence[Network], country_code: str) -> list[Network]:
    """Networks whose country code equals ``country_code`` (case-insensitive), in order."""
    code = (country_code or "").lower()
    if not code:
        return []
    return [n for n in networks if n.country_code.lower() == code]
