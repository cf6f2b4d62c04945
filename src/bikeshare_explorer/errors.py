"""
Typed errors raised by the directory and station fetchers.

Callers (flows, CLI) catch these and turn them into user-facing messages;
low-level helpers never print or alert on their own.

"No matches" is deliberately not an exception: an empty filter result is a
valid outcome reported through ``MessageReason.NO_MATCHES``.
"""

from __future__ import annotations


class BikeshareError(Exception):
    """Base class for every error surfaced by bikeshare_explorer."""


class FetchError(BikeshareError):
    """Transport-level failure: network error, non-success status or non-JSON body."""

    def __init__(
        self, message: str, *, url: str | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedDirectory(BikeshareError):
    """The ``/networks`` response is missing its top-level ``networks`` list."""


class MalformedNetworkDetail(BikeshareError):
    """A ``/networks/{id}`` response is missing ``network.stations``."""

    def __init__(self, message: str, *, network_id: str) -> None:
        super().__init__(message)
        self.network_id = network_id
