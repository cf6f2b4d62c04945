"""Whole-country station aggregation across several networks.

Fetches are launched together on a thread pool and the call returns only
once every one of them has settled. Each fetch owns one output slot (its
position in the selected list), so completion order never affects the
merged order.

The fetch function is injected: this module never talks to the API itself.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from bikeshare_explorer.reference.limits import MAX_NETWORKS_TO_QUERY
from bikeshare_explorer.schemas import AggregationResult, FetchFailure, Network, Station

logger = logging.getLogger(__name__)

StationFetcher = Callable[[str], Sequence[Station]]

# One slot per selected network: the stations, or the failure.
_Slot = tuple[Network, Sequence[Station] | None, Exception | None]


def _fetch_one(fetch: StationFetcher, network: Network) -> _Slot:
    """Run one fetch, capturing its failure instead of raising."""
    try:
        return network, fetch(network.id), None
    except Exception as exc:  # noqa: BLE001 - recorded in AggregationResult.failures
        logger.warning("Station fetch failed for network %s: %s", network.id, exc)
        return network, None, exc


def _tag(stations: Sequence[Station], network: Network) -> list[Station]:
    return [s.model_copy(update={"network_name": network.label}) for s in stations]


def aggregate_stations(
    candidates: Sequence[Network],
    max_networks_to_query: int = MAX_NETWORKS_TO_QUERY,
    *,
    fetch: StationFetcher,
    max_workers: int | None = None,
) -> AggregationResult:
    """
    Fetch and merge the stations of the first ``max_networks_to_query`` candidates.

    A failing network never aborts the others: its error lands in
    ``failures`` and the merge carries on. Stations are tagged with the
    owning network's name and concatenated in candidate order, keeping each
    network's own station order. If every fetch fails the result is empty
    but valid.

    Args:
        candidates: Ordered networks, typically one country's.
        max_networks_to_query: Fan-out cap; the rest are reported through
            ``available_network_count - queried_network_count``.
        fetch: ``network_id -> stations``; raises on failure.
        max_workers: Thread pool size (defaults to one thread per selected
            network).

    Raises:
        ValueError: ``candidates`` is empty or the cap is below 1.
    """
    if not candidates:
        msg = "No candidate networks to aggregate"
        raise ValueError(msg)
    if max_networks_to_query < 1:
        msg = f"max_networks_to_query must be >= 1, got {max_networks_to_query}"
        raise ValueError(msg)

    selected = list(candidates[:max_networks_to_query])
    logger.info(
        "Fetching stations from %d of %d network(s)", len(selected), len(candidates)
    )

    with ThreadPoolExecutor(max_workers=max_workers or len(selected)) as executor:
        slots: list[_Slot] = list(executor.map(lambda n: _fetch_one(fetch, n), selected))

    stations: list[Station] = []
    failures: list[FetchFailure] = []
    for network, fetched, error in slots:
        if error is not None:
            failures.append(
                FetchFailure(
                    network_id=network.id,
                    network_name=network.name,
                    error=str(error) or type(error).__name__,
                    error_type=type(error).__name__,
                )
            )
            continue
        stations.extend(_tag(fetched or [], network))

    return AggregationResult(
        stations=stations,
        queried_network_count=len(selected),
        available_network_count=len(candidates),
        failures=failures,
    )
