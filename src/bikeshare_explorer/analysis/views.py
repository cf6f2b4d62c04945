"""View models handed to the rendering layer.

Each builder produces a complete, immutable view in one go: the records to
display plus the messages explaining why the view is empty, truncated or
incomplete. Renderers never have to guess which condition occurred.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from bikeshare_explorer.analysis.countries import summarize
from bikeshare_explorer.analysis.search import filter_networks
from bikeshare_explorer.errors import (
    BikeshareError,
    FetchError,
    MalformedDirectory,
    MalformedNetworkDetail,
)
from bikeshare_explorer.reference.countries import flag_of, name_of
from bikeshare_explorer.reference.limits import (
    COUNTRY_STATION_DISPLAY_LIMIT,
    NETWORK_DISPLAY_LIMIT,
    STATION_DISPLAY_LIMIT,
)
from bikeshare_explorer.schemas import (
    UNKNOWN,
    AggregationResult,
    CountrySummaryEntry,
    DirectorySnapshot,
    FetchFailure,
    Network,
    Station,
)

# =============================================================================
# Messages
# =============================================================================


class MessageKind(StrEnum):
    """How the renderer should style a message."""

    INFO = "info"
    ERROR = "error"


class MessageReason(StrEnum):
    """Why a view is empty, truncated or incomplete."""

    NO_MATCHES = "no_matches"
    TRUNCATED = "truncated"
    FETCH_FAILED = "fetch_failed"
    MALFORMED_DIRECTORY = "malformed_directory"
    MALFORMED_NETWORK_DETAIL = "malformed_network_detail"
    NO_STATIONS = "no_stations"
    NO_NETWORKS_IN_COUNTRY = "no_networks_in_country"
    PARTIAL_FAILURE = "partial_failure"
    ALL_FAILED = "all_failed"
    COVERAGE_INCOMPLETE = "coverage_incomplete"
    SUMMARY = "summary"


class ViewMessage(BaseModel):
    """A user-facing message attached to a view."""

    model_config = ConfigDict(frozen=True)

    kind: MessageKind
    reason: MessageReason
    text: str


def _info(reason: MessageReason, text: str) -> ViewMessage:
    return ViewMessage(kind=MessageKind.INFO, reason=reason, text=text)


def _error(reason: MessageReason, text: str) -> ViewMessage:
    return ViewMessage(kind=MessageKind.ERROR, reason=reason, text=text)


# =============================================================================
# Records
# =============================================================================


class NetworkCard(BaseModel):
    """One network in the search results."""

    model_config = ConfigDict(frozen=True)

    network_id: str
    name: str
    city: str
    country_code: str
    country_name: str
    flag: str

    @property
    def place(self) -> str:
        """``"Oslo, Norway"``, or just the country when the city is unknown."""
        country = self.country_name or self.country_code
        return ", ".join(part for part in (self.city, country) if part)


class StationCard(BaseModel):
    """One station with its availability, ready to print."""

    model_config = ConfigDict(frozen=True)

    name: str
    free_bikes: int
    docks: str
    network_name: str | None = None


def network_card(network: Network) -> NetworkCard:
    code = network.country_code
    return NetworkCard(
        network_id=network.id,
        name=network.name or "Unnamed network",
        city=network.city,
        country_code=code,
        country_name=name_of(code),
        flag=flag_of(code),
    )


def station_card(station: Station) -> StationCard:
    # 0 free docks is a real value; only a missing count shows as N/A
    docks = "N/A" if station.empty_slots == UNKNOWN else str(station.empty_slots)
    return StationCard(
        name=station.name or "Unnamed station",
        free_bikes=station.free_bikes,
        docks=docks,
        network_name=station.network_name,
    )


# =============================================================================
# Views
# =============================================================================


class _View(BaseModel):
    model_config = ConfigDict(frozen=True)

    messages: list[ViewMessage] = Field(default_factory=list)

    @property
    def has_error(self) -> bool:
        return any(m.kind is MessageKind.ERROR for m in self.messages)

    @property
    def reasons(self) -> list[MessageReason]:
        return [m.reason for m in self.messages]


class DirectoryView(_View):
    """Search results plus the per-country summary."""

    query: str = ""
    cards: list[NetworkCard] = Field(default_factory=list)
    countries: list[CountrySummaryEntry] = Field(default_factory=list)
    total_matches: int = 0


class StationsView(_View):
    """Stations of a single network."""

    network_id: str
    cards: list[StationCard] = Field(default_factory=list)
    total_stations: int = 0


class CountryStationsView(_View):
    """Stations merged across the networks of one country."""

    country_code: str
    display_name: str
    flag: str
    cards: list[StationCard] = Field(default_factory=list)
    total_stations: int = 0
    queried_network_count: int = 0
    available_network_count: int = 0
    failures: list[FetchFailure] = Field(default_factory=list)


# =============================================================================
# Builders
# =============================================================================


def build_directory_view(
    snapshot: DirectorySnapshot,
    query: str | None = "",
    display_limit: int = NETWORK_DISPLAY_LIMIT,
) -> DirectoryView:
    """
    Filter ``snapshot`` by ``query`` and build the search results view.

    The summary counts every match; only the cards are capped at
    ``display_limit``.
    """
    matching = filter_networks(snapshot.networks, query)
    total = len(matching)

    messages: list[ViewMessage] = []
    if total == 0:
        messages.append(
            _info(
                MessageReason.NO_MATCHES,
                "No networks match your search. Try a different city or country.",
            )
        )
    elif total > display_limit:
        messages.append(
            _info(
                MessageReason.TRUNCATED,
                f"Showing {display_limit} of {total} matching networks. "
                "Narrow the search to see more.",
            )
        )

    return DirectoryView(
        query=query or "",
        cards=[network_card(n) for n in matching[:display_limit]],
        countries=summarize(matching),
        total_matches=total,
        messages=messages,
    )


def directory_error_view(query: str | None, error: BikeshareError) -> DirectoryView:
    """Directory view for a failed load."""
    if isinstance(error, MalformedDirectory):
        message = _error(MessageReason.MALFORMED_DIRECTORY, "No network data available.")
    else:
        message = _error(
            MessageReason.FETCH_FAILED,
            f"Could not load the network directory: {error}",
        )
    return DirectoryView(query=query or "", messages=[message])


def build_stations_view(
    network_id: str,
    stations: Sequence[Station],
    display_limit: int = STATION_DISPLAY_LIMIT,
) -> StationsView:
    """Station list for one network, capped at ``display_limit``."""
    total = len(stations)
    messages: list[ViewMessage] = []
    if total == 0:
        messages.append(_info(MessageReason.NO_STATIONS, "This network reports no stations."))
    elif total > display_limit:
        messages.append(
            _info(MessageReason.TRUNCATED, f"Showing {display_limit} of {total} stations.")
        )

    return StationsView(
        network_id=network_id,
        cards=[station_card(s) for s in stations[:display_limit]],
        total_stations=total,
        messages=messages,
    )


def stations_error_view(network_id: str, error: BikeshareError) -> StationsView:
    """Station view for a failed single-network fetch."""
    if isinstance(error, MalformedNetworkDetail):
        message = _error(
            MessageReason.MALFORMED_NETWORK_DETAIL,
            "Failed to load stations for this network: the response has no station list.",
        )
    elif isinstance(error, FetchError):
        message = _error(
            MessageReason.FETCH_FAILED,
            f"Failed to load stations for this network: {error}",
        )
    else:
        message = _error(MessageReason.FETCH_FAILED, str(error))
    return StationsView(network_id=network_id, messages=[message])


def empty_country_view(country_code: str) -> CountryStationsView:
    """Country view when the directory lists no networks for the country."""
    name = name_of(country_code) or country_code
    return CountryStationsView(
        country_code=country_code,
        display_name=name,
        flag=flag_of(country_code),
        messages=[_info(MessageReason.NO_NETWORKS_IN_COUNTRY, f"No networks found in {name}.")],
    )


def country_error_view(country_code: str, error: BikeshareError) -> CountryStationsView:
    """Country view when the directory itself could not be loaded."""
    reason = (
        MessageReason.MALFORMED_DIRECTORY
        if isinstance(error, MalformedDirectory)
        else MessageReason.FETCH_FAILED
    )
    return CountryStationsView(
        country_code=country_code,
        display_name=name_of(country_code) or country_code,
        flag=flag_of(country_code),
        messages=[_error(reason, f"Could not load the network directory: {error}")],
    )


def build_country_view(
    country_code: str,
    result: AggregationResult,
    display_limit: int = COUNTRY_STATION_DISPLAY_LIMIT,
) -> CountryStationsView:
    """
    Aggregated station view for a country.

    The display cap only trims the cards; network accounting is copied from
    ``result`` unchanged.
    """
    name = name_of(country_code) or country_code
    total = len(result.stations)
    failed = len(result.failures)
    shown = min(total, display_limit)

    messages: list[ViewMessage] = []
    if result.all_failed:
        messages.append(
            _error(MessageReason.ALL_FAILED, f"No station data available for {name}.")
        )
    else:
        if failed:
            messages.append(
                _error(
                    MessageReason.PARTIAL_FAILURE,
                    f"Stations from {failed} of {result.queried_network_count} networks "
                    "could not be loaded.",
                )
            )
        if total == 0:
            messages.append(_info(MessageReason.NO_STATIONS, f"No stations reported in {name}."))
        else:
            messages.append(
                _info(
                    MessageReason.SUMMARY,
                    f"Showing {shown} stations from {result.queried_network_count} "
                    f"networks in {name}.",
                )
            )
    if total > display_limit:
        messages.append(
            _info(MessageReason.TRUNCATED, f"Showing {display_limit} of {total} stations.")
        )
    if not result.is_complete:
        messages.append(
            _info(
                MessageReason.COVERAGE_INCOMPLETE,
                f"Showing stations from {result.queried_network_count} of "
                f"{result.available_network_count} networks in {name}. Narrow your "
                "search or request a specific network to see more.",
            )
        )

    return CountryStationsView(
        country_code=country_code,
        display_name=name,
        flag=flag_of(country_code),
        cards=[station_card(s) for s in result.stations[:display_limit]],
        total_stations=total,
        queried_network_count=result.queried_network_count,
        available_network_count=result.available_network_count,
        failures=list(result.failures),
        messages=messages,
    )
