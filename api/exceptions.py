"""Errors raised by the analytics API client."""

from __future__ import annotations


class AnalyticsError(Exception):
    """Base class for every failed call to the analytics backend."""


class BackendUnavailableError(AnalyticsError):
    """The request never got a response (connection refused, DNS, reset...)."""


class MalformedResponseError(AnalyticsError):
    """The body was not JSON, or did not match the expected schema."""


class BackendStatusError(AnalyticsError):
    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url
