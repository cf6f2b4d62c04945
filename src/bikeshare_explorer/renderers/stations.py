"""Station availability as text."""

from __future__ import annotations

from bikeshare_explorer.analysis.views import CountryStationsView, StationsView
from bikeshare_explorer.renderers import render_template


def build_stations_text(view: StationsView) -> str:
    return render_template("stations.txt.j2", view=view)


def build_country_stations_text(view: CountryStationsView) -> str:
    """Aggregated stations, each line prefixed with its network (provenance)."""
    return render_template("country_stations.txt.j2", view=view)
