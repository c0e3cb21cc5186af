"""Police Smart Analytics dashboard."""

from __future__ import annotations

import asyncio
import logging

import pandas as pd
import plotly.express as px
import streamlit as st

from api.client import AnalyticsClient
from dashboard.config import Settings
from dashboard.controller import DashboardController
from dashboard.filters import FACETS, FilterState, option_labels, option_value
from dashboard.view import TYPE_COLOR, badge_css

CHART_COLOR = "#4f46e5"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# ── Page config ────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Police Smart Analytics",
    page_icon="🚓",
    layout="wide",
)


# ── Session ────────────────────────────────────────────────────────────
def _controller() -> DashboardController:
    if "controller" not in st.session_state:
        settings = Settings.from_env()
        st.session_state.controller = DashboardController(
            AnalyticsClient(settings.backend_url),
        )
        st.session_state.filters = FilterState()
        st.session_state.needs_refresh = True
    return st.session_state.controller


controller = _controller()
filters: FilterState = st.session_state.filters

# ── Header ─────────────────────────────────────────────────────────────
head, refresh_col, seed_col = st.columns([6, 1, 2])
head.title("Police Smart Analytics")
if refresh_col.button("Refresh", type="primary"):
    st.session_state.needs_refresh = True
if seed_col.button("Seed sample data"):
    with st.spinner("Seeding…"):
        asyncio.run(controller.seed_and_refresh(filters))
    st.session_state.needs_refresh = False

# ── Filters ────────────────────────────────────────────────────────────
cols = st.columns(len(FACETS) + 1)
for col, facet in zip(cols, FACETS):
    labels = option_labels(facet)
    current = getattr(filters, facet)
    label = col.selectbox(
        facet.title(), labels,
        index=labels.index(current) if current in labels else 0,
        key=f"facet_{facet}",
        label_visibility="collapsed",
    )
    filters = filters.with_field(facet, option_value(facet, label))
st.session_state.filters = filters
if cols[-1].button("Apply", use_container_width=True):
    st.session_state.needs_refresh = True

if st.session_state.needs_refresh:
    with st.spinner("Loading…"):
        asyncio.run(controller.refresh(filters))
    st.session_state.needs_refresh = False

# ── KPIs ───────────────────────────────────────────────────────────────
for col, kpi in zip(st.columns(4), controller.kpis()):
    col.metric(kpi.label, kpi.value)

# ── Incidents by type ─────────────────────────────────────────────────
st.subheader("Incidents by Type")
bars = controller.type_bars()
if bars:
    bar_df = pd.DataFrame({
        "type": [f"{b.label} ({b.count})" for b in bars],
        "share": [b.fraction * 100 for b in bars],
    })
    fig = px.bar(bar_df, x="share", y="type", orientation="h",
                 color_discrete_sequence=[CHART_COLOR], range_x=[0, 100])
    fig.update_layout(yaxis=dict(autorange="reversed"), yaxis_title="",
                      xaxis_title="% of all incidents")
    st.plotly_chart(fig, use_container_width=True)

# ── Incident table ────────────────────────────────────────────────────
message = controller.table_message()
if message:
    st.info(message)
else:
    rows = controller.incident_rows()
    table = pd.DataFrame({
        "ID": [r.incident_id for r in rows],
        "Type": [r.type for r in rows],
        "Severity": [r.severity for r in rows],
        "Status": [r.status for r in rows],
        "Precinct": [r.precinct for r in rows],
        "Response (min)": [r.response_minutes for r in rows],
    })
    type_css = [badge_css(TYPE_COLOR)] * len(rows)
    sev_css = [badge_css(r.severity_color) for r in rows]
    status_css = [badge_css(r.status_color) for r in rows]
    styled = (
        table.style
        .apply(lambda _: type_css, subset=["Type"])
        .apply(lambda _: sev_css, subset=["Severity"])
        .apply(lambda _: status_css, subset=["Status"])
    )
    st.dataframe(styled, use_container_width=True, hide_index=True)
