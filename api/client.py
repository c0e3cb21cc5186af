"""Async client for the police analytics REST API."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from api.exceptions import (
    BackendStatusError,
    BackendUnavailableError,
    MalformedResponseError,
)
from api.models import Incident, IncidentList, Summary

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_SEED_COUNT = 80

SUMMARY_PATH = "/analytics/summary"
INCIDENTS_PATH = "/incidents"
SEED_PATH = "/incidents/seed"


class AnalyticsClient:
    """Thin wrapper over the three backend endpoints the dashboard uses.

    A fresh ``httpx.AsyncClient`` is opened per call, so one instance can be
    shared across event loops (Streamlit runs a new loop on every rerun).
    Every failure surfaces as an ``AnalyticsError`` subclass.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BACKEND_URL,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        params: Sequence[tuple[str, str | int]] | None = None,
    ) -> httpx.Response:
        try:
            async with self._http() as http:
                resp = await http.request(method, path, params=params)
        except httpx.HTTPError as exc:
            raise BackendUnavailableError(f"{method} {path}: {exc}") from exc
        if resp.is_error:
            raise BackendStatusError(resp.status_code, str(resp.url))
        return resp

    @staticmethod
    def _json(resp: httpx.Response):
        try:
            return resp.json()
        except ValueError as exc:
            raise MalformedResponseError(f"non-JSON body from {resp.url}") from exc

    async def get_summary(self) -> Summary:
        resp = await self._request("GET", SUMMARY_PATH)
        try:
            return Summary.model_validate(self._json(resp))
        except ValidationError as exc:
            raise MalformedResponseError(f"bad summary payload: {exc}") from exc

    async def list_incidents(
        self, query: Sequence[tuple[str, str]] = (),
    ) -> list[Incident]:
        """Incidents matching the given facet constraints, in backend order."""
        resp = await self._request("GET", INCIDENTS_PATH, params=list(query))
        try:
            page = IncidentList.model_validate(self._json(resp))
        except ValidationError as exc:
            raise MalformedResponseError(f"bad incident list payload: {exc}") from exc
        return page.items

    async def seed(self, n: int = DEFAULT_SEED_COUNT) -> None:
        """Ask the backend to generate ``n`` demo incidents. Response body is ignored."""
        await self._request("POST", SEED_PATH, params=[("n", n)])
        logger.info("requested %d seeded incidents", n)
