"""Search results and country summary as text."""

from __future__ import annotations

from bikeshare_explorer.analysis.countries import pill_query
from bikeshare_explorer.analysis.views import DirectoryView
from bikeshare_explorer.renderers import render_template


def build_directory_text(view: DirectoryView) -> str:
    """Messages, country pills, then one line per network card."""
    return render_template("directory.txt.j2", view=view)


def build_countries_text(view: DirectoryView) -> str:
    """Country summary only, with the query each pill re-runs."""
    pills = [(entry, pill_query(entry.country_code)) for entry in view.countries]
    return render_template("countries.txt.j2", view=view, pills=pills)
