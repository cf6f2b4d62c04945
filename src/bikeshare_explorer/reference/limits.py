"""Display caps and request fan-out limits."""

# Network cards shown for one search.
NETWORK_DISPLAY_LIMIT: int = 60

# Stations shown for a single network.
STATION_DISPLAY_LIMIT: int = 50

# Stations shown for a whole-country aggregation. Does not affect the
# queried/available network accounting.
COUNTRY_STATION_DISPLAY_LIMIT: int = 200

# Networks queried concurrently for one whole-country aggregation.
MAX_NETWORKS_TO_QUERY: int = 12
