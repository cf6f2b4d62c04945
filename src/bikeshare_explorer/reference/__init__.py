"""Static reference data and helpers that don't depend on API calls.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/helpers
2. Re-export from this ``__init__.py``
"""

from bikeshare_explorer.reference.countries import flag_of as flag_of
from bikeshare_explorer.reference.countries import name_of as name_of
from bikeshare_explorer.reference.limits import (
    COUNTRY_STATION_DISPLAY_LIMIT as COUNTRY_STATION_DISPLAY_LIMIT,
)
from bikeshare_explorer.reference.limits import MAX_NETWORKS_TO_QUERY as MAX_NETWORKS_TO_QUERY
from bikeshare_explorer.reference.limits import NETWORK_DISPLAY_LIMIT as NETWORK_DISPLAY_LIMIT
from bikeshare_explorer.reference.limits import STATION_DISPLAY_LIMIT as STATION_DISPLAY_LIMIT
