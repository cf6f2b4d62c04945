"""
Prefect flows for the explorer.

Flows:
- search_networks: directory -> filter -> DirectoryView
- network_stations: one network -> StationsView
- country_stations: directory -> country candidates -> concurrent fetch -> CountryStationsView

Usage (local):
    python -m bikeshare_explorer.flows.explore oslo
    bikeshare-explorer country fr

Usage (Prefect):
    prefect server start  # Optional, for dashboard
"""
