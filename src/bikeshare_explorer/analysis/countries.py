"""Per-country network counts for the summary pills."""

from __future__ import annotations

from collections.abc import Sequence

from bikeshare_explorer.reference.countries import flag_of, name_of
from bikeshare_explorer.schemas import CountrySummaryEntry, Network


def summarize(networks: Sequence[Network]) -> list[CountrySummaryEntry]:
    """
    Count matching networks per country code.

    Networks without a country code are left out. Entries are sorted by
    descending count; ties keep the order the code was first seen.
    """
    counts: dict[str, int] = {}
    for network in networks:
        code = network.country_code
        if not code:
            continue
        counts[code] = counts.get(code, 0) + 1

    # sorted() is stable, so equal counts stay in first-seen order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [
        CountrySummaryEntry(
            country_code=code,
            display_name=name_of(code),
            flag=flag_of(code),
            count=count,
        )
        for code, count in ranked
    ]


def pill_query(country_code: str) -> str:
    """
    Search text used when a country pill is selected.

    The directory is re-filtered by the country's display name, not its
    code. A display name that appears in no network's name or city and that
    differs from the resolved name of its code can under-match; that is the
    existing behaviour.
    """
    return name_of(country_code) or country_code
