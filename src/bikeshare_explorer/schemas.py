"""
Domain models for bikeshare explorer.

Pydantic models for data from the CityBikes API and for the derived views.
These define the canonical schema - datasources normalize API responses to these.
All models are frozen: a fetched record is never mutated, only replaced.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

#: Sentinel for a station that does not report its free docks.
UNKNOWN: Literal["unknown"] = "unknown"


def _or_default(handler: ValidatorFunctionWrapHandler, value: Any, default: Any = None) -> Any:
    """Validate an optional field, falling back to ``default`` when it is unusable.

    A record with a valid identity is never rejected over one of its
    optional fields.
    """
    try:
        return handler(value)
    except ValidationError:
        return default


# =============================================================================
# Networks
# =============================================================================


class Location(BaseModel):
    """Where a network operates."""

    model_config = ConfigDict(
        frozen=True, extra="ignore", str_strip_whitespace=True, coerce_numbers_to_str=True
    )

    city: str | None = None
    country: str | None = Field(default=None, description="ISO 3166-1 alpha-2 code")
    latitude: float | None = None
    longitude: float | None = None

    @field_validator("*", mode="wrap")
    @classmethod
    def _lenient(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_default(handler, value)


class Network(BaseModel):
    """A bike-share operator/system from the directory."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1, description="Unique network identifier")
    name: str | None = None
    location: Location | None = None

    @field_validator("name", "location", mode="wrap")
    @classmethod
    def _lenient(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_default(handler, value)

    @property
    def city(self) -> str:
        return (self.location.city if self.location else None) or ""

    @property
    def country_code(self) -> str:
        return (self.location.country if self.location else None) or ""

    @property
    def label(self) -> str:
        """Name used for provenance and display; falls back to the id."""
        return self.name or self.id


class DirectorySnapshot(BaseModel):
    """The deduplicated network directory as of one successful load."""

    model_config = ConfigDict(frozen=True)

    networks: list[Network] = Field(default_factory=list)
    fetched_at: datetime = Field(default_factory=datetime.now)
    raw_count: int = 0
    dropped_count: int = 0


# =============================================================================
# Stations
# =============================================================================


class Station(BaseModel):
    """A docking point inside a network.

    Extra API fields (``id``, ``latitude``, ``timestamp``, ``extra``...) are
    kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    name: str = ""
    free_bikes: int = Field(default=0, ge=0)
    empty_slots: int | Literal["unknown"] = UNKNOWN
    network_name: str | None = Field(default=None, description="Owning network (aggregates only)")

    # null, negative or non-integral values fall back to the defaults
    @field_validator("name", mode="wrap")
    @classmethod
    def _name_default(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_default(handler, value, "")

    @field_validator("free_bikes", mode="wrap")
    @classmethod
    def _free_bikes_default(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_default(handler, value, 0)

    @field_validator("empty_slots", mode="wrap")
    @classmethod
    def _empty_slots_default(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        slots = _or_default(handler, value, UNKNOWN)
        if isinstance(slots, int) and slots < 0:
            return UNKNOWN
        return slots

    @property
    def docks_known(self) -> bool:
        return self.empty_slots != UNKNOWN


# =============================================================================
# Derived
# =============================================================================


class CountrySummaryEntry(BaseModel):
    """Number of matching networks in one country."""

    model_config = ConfigDict(frozen=True)

    country_code: str
    display_name: str
    flag: str
    count: int = Field(..., ge=1)


class FetchFailure(BaseModel):
    """One network whose station fetch failed during an aggregation."""

    model_config = ConfigDict(frozen=True)

    network_id: str
    network_name: str | None = None
    error: str
    error_type: str = "FetchError"


class AggregationResult(BaseModel):
    """Stations merged from several networks, with coverage accounting."""

    model_config = ConfigDict(frozen=True)

    stations: list[Station] = Field(default_factory=list)
    queried_network_count: int = Field(..., ge=0)
    available_network_count: int = Field(..., ge=0)
    failures: list[FetchFailure] = Field(default_factory=list)

    @model_validator(mode="after")
    def _queried_within_available(self) -> AggregationResult:
        if self.queried_network_count > self.available_network_count:
            msg = "queried_network_count cannot exceed available_network_count"
            raise ValueError(msg)
        return self

    @property
    def unqueried_network_count(self) -> int:
        return self.available_network_count - self.queried_network_count

    @property
    def is_complete(self) -> bool:
        """True when every available network was queried."""
        return self.queried_network_count == self.available_network_count

    @property
    def all_failed(self) -> bool:
        return self.queried_network_count > 0 and len(self.failures) == self.queried_network_count
