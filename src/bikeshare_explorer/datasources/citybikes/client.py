"""CityBikes API client: endpoint paths and the JSON fetch helper.

API docs: https://api.citybik.es/v2/

Every call is a single attempt. Transport failures, non-success statuses and
bodies that are not JSON all surface as ``FetchError``.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from bikeshare_explorer.config import get_settings
from bikeshare_explorer.errors import FetchError
from bikeshare_explorer.services.http import session

logger = logging.getLogger(__name__)

NETWORKS_PATH = "/networks"


def network_path(network_id: str) -> str:
    """Detail resource for one network (``/networks/{id}``)."""
    return f"{NETWORKS_PATH}/{quote(str(network_id), safe='')}"


def get_json(path: str, *, base_url: str | None = None) -> Any:
    """
    GET ``{base_url}{path}`` and decode the JSON body.

    Args:
        path: Resource path starting with ``/``.
        base_url: API root (defaults to ``Settings.api_base_url``).

    Raises:
        FetchError: On connection errors, timeouts, non-2xx statuses or a
            body that is not valid JSON.
    """
    root = (base_url or get_settings().api_base_url).rstrip("/")
    url = f"{root}{path}"
    logger.debug("GET %s", url)

    try:
        resp = session.get(url)
    except requests.RequestException as exc:
        msg = f"Request to {url} failed: {exc}"
        raise FetchError(msg, url=url) from exc

    if not resp.ok:
        msg = f"Request to {url} returned HTTP {resp.status_code}"
        raise FetchError(msg, url=url, status_code=resp.status_code)

    try:
        return resp.json()
    except ValueError as exc:
        msg = f"Response from {url} is not valid JSON"
        raise FetchError(msg, url=url, status_code=resp.status_code) from exc
