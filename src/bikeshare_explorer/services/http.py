"""
Shared HTTP client for the CityBikes API.

Provides a pre-configured ``requests.Session`` that makes exactly one attempt
per request (no retry, no backoff) and injects a default timeout.  All
datasource modules should use this instead of bare ``requests.get``.

Usage::

    from bikeshare_explorer.services.http import session

    resp = session.get("https://api.citybik.es/v2/networks")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from bikeshare_explorer.reference.limits import MAX_NETWORKS_TO_QUERY

#: Single attempt per resource; failures surface to the caller.
DEFAULT_RETRY = Retry(
    total=0,
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds

#: Connections kept per host; one per concurrent station fetch.
DEFAULT_POOL_MAXSIZE = MAX_NETWORKS_TO_QUERY


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    pool_maxsize: int = DEFAULT_POOL_MAXSIZE,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        pool_maxsize: Connections kept open per host.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY, pool_maxsize=pool_maxsize)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = "bikeshare-explorer/0.1"
    s.headers["Accept"] = "application/json"

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session; import and use directly.
session: requests.Session = create_session()
