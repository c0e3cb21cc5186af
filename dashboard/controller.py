"""Fetch orchestration for the incident dashboard."""

from __future__ import annotations

import asyncio
import itertools
import logging

from api.client import DEFAULT_SEED_COUNT, AnalyticsClient
from api.exceptions import AnalyticsError
from dashboard import view
from dashboard.filters import FilterState, to_query
from dashboard.state import (
    INITIAL_STATE,
    Event,
    RefreshFailed,
    RefreshStarted,
    RefreshSucceeded,
    ViewState,
    reduce,
)

logger = logging.getLogger(__name__)


class DashboardController:
    """Runs refresh/seed cycles against the backend and owns the ``ViewState``.

    The network calls live here; every state change goes through
    ``dashboard.state.reduce`` so the snapshot is replaced, never edited.
    """

    def __init__(
        self,
        client: AnalyticsClient,
        *,
        seed_count: int = DEFAULT_SEED_COUNT,
        discard_stale: bool = False,
    ) -> None:
        self.client = client
        self.seed_count = seed_count
        self.discard_stale = discard_stale
        self._state = INITIAL_STATE
        self._generations = itertools.count(1)

    @property
    def state(self) -> ViewState:
        return self._state

    def _dispatch(self, event: Event) -> None:
        self._state = reduce(self._state, event, discard_stale=self.discard_stale)

    async def refresh(self, filters: FilterState) -> ViewState:
        """Reload the summary and the filtered incident list together."""
        generation = next(self._generations)
        self._dispatch(RefreshStarted(generation))
        try:
            summary, incidents = await asyncio.gather(
                self.client.get_summary(),
                self.client.list_incidents(to_query(filters)),
            )
        except AnalyticsError as exc:
            logger.error("dashboard refresh #%d failed: %s", generation, exc)
            self._dispatch(RefreshFailed(generation, str(exc)))
        except asyncio.CancelledError:
            self._dispatch(RefreshFailed(generation, "cancelled"))
            raise
        else:
            self._dispatch(RefreshSucceeded(generation, summary, tuple(incidents)))
            logger.debug(
                "dashboard refresh #%d: %d incidents", generation, len(incidents),
            )
        return self._state

    async def seed_and_refresh(self, filters: FilterState) -> ViewState:
        """Generate demo records, then refresh. A failed seed does not stop the refresh."""
        try:
            await self.client.seed(self.seed_count)
        except AnalyticsError as exc:
            logger.warning("seeding %d incidents failed: %s", self.seed_count, exc)
        return await self.refresh(filters)

    # ── Derived view models ───────────────────────────────────────────
    def kpis(self) -> list[view.Kpi]:
        return view.kpi_cards(self._state.summary)

    def type_bars(self) -> list[view.TypeBar]:
        return view.type_bars(self._state.summary)

    def incident_rows(self) -> list[view.IncidentRow]:
        return view.incident_rows(self._state.incidents)

    def table_message(self) -> str | None:
        return view.table_message(self._state)
