"""Search, summary, aggregation and view-model logic.

This is the domain logic layer between datasources and renderers.

Dependency rule: analysis/ imports schemas and reference helpers only.
It never calls the API directly: the station aggregator receives its fetch
function from the caller (see ``flows/explore.py``), and nothing here
produces text or HTML.

Modules:
  - search: filter_networks, in_country (multi-field, order-preserving)
  - countries: summarize (per-country counts), pill_query
  - aggregate: aggregate_stations (concurrent fan-out, partial failures)
  - views: DirectoryView, StationsView, CountryStationsView and builders

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function over ``schemas`` models.
2. No HTTP, no Prefect decorators, no printing.
3. Wire into a flow in ``flows/explore.py`` and pass the result to a renderer.
4. Add tests in ``tests/test_{name}.py``.
"""
