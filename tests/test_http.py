"""Tests for the shared HTTP client (single attempt, default timeout)."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from bikeshare_explorer.reference.limits import MAX_NETWORKS_TO_QUERY
from bikeshare_explorer.services.http import DEFAULT_RETRY, DEFAULT_TIMEOUT, create_session, session


class TestDefaultRetry:
    """Verify that requests are never repeated."""

    def test_no_retries(self) -> None:
        assert DEFAULT_RETRY.total == 0

    def test_status_not_raised_by_adapter(self) -> None:
        assert DEFAULT_RETRY.raise_on_status is False


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_https_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://api.citybik.es")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_mounts_http_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("http://api.citybik.es")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_adapter_makes_single_attempt(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://api.citybik.es")
        assert adapter.max_retries.total == 0

    def test_custom_retry(self) -> None:
        custom = Retry(total=2)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://api.citybik.es")
        assert adapter.max_retries.total == 2

    def test_pool_holds_one_connection_per_concurrent_fetch(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://api.citybik.es")
        assert adapter.poolmanager.connection_pool_kw["maxsize"] >= MAX_NETWORKS_TO_QUERY

    def test_custom_pool_size(self) -> None:
        s = create_session(pool_maxsize=25)
        adapter = s.get_adapter("https://api.citybik.es")
        assert adapter.poolmanager.connection_pool_kw["maxsize"] == 25

    def test_headers(self) -> None:
        s = create_session()
        assert "bikeshare-explorer" in s.headers["User-Agent"]
        assert s.headers["Accept"] == "application/json"

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://api.citybik.es/v2/networks").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://api.citybik.es/v2/networks").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=5)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 5


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        adapter = session.get_adapter("https://api.citybik.es")
        assert adapter.max_retries.total == 0

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30
