"""Bikeshare Explorer - search bike-share networks and their station availability.

Architecture::

    datasources/   CityBikes API (directory normalization, station fetch)
    analysis/      Search, country summary, concurrent aggregation, view models
    renderers/     Pure view -> text (Jinja2 templates)
    flows/         Prefect orchestration (load -> analyse -> view)
    services/      Shared utilities (single-attempt HTTP session)
    reference/     Country flags/names, display caps

Data flow: datasources -> DirectorySnapshot -> analysis -> views -> renderers -> cli

There is no module-level directory cache: every flow loads its own
snapshot and threads it through the analysis functions.
"""

__version__ = "0.1.0"

from bikeshare_explorer.config import Settings
from bikeshare_explorer.schemas import AggregationResult, DirectorySnapshot, Network, Station

__all__ = [
    "AggregationResult",
    "DirectorySnapshot",
    "Network",
    "Settings",
    "Station",
    "__version__",
]
