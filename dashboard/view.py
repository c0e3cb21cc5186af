"""Display values derived from the latest summary and incident list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from api.models import Incident, Summary
from dashboard.filters import STATUSES
from dashboard.state import ViewState

PLACEHOLDER = "—"
LOADING_MESSAGE = "Loading…"
EMPTY_MESSAGE = 'No incidents yet. Use "Seed sample data" to generate demo records.'

# ── Badge colors ───────────────────────────────────────────────────────
NEUTRAL_COLOR = "gray"
TYPE_COLOR = "blue"
SEVERITY_COLORS = {
    "low": "green",
    "medium": "amber",
    "high": "red",
    "critical": "red",
}
STATUS_COLORS = {s: "violet" for s in STATUSES}

# (background, foreground)
BADGE_STYLES = {
    "gray": ("#f3f4f6", "#374151"),
    "blue": ("#dbeafe", "#1d4ed8"),
    "green": ("#dcfce7", "#15803d"),
    "red": ("#fee2e2", "#b91c1c"),
    "amber": ("#fef3c7", "#b45309"),
    "violet": ("#ede9fe", "#6d28d9"),
}


def severity_color(severity: str | None) -> str:
    return SEVERITY_COLORS.get(severity or "", NEUTRAL_COLOR)


def status_color(status: str | None) -> str:
    return STATUS_COLORS.get(status or "", NEUTRAL_COLOR)


def badge_css(color: str) -> str:
    bg, fg = BADGE_STYLES.get(color, BADGE_STYLES[NEUTRAL_COLOR])
    return f"background-color: {bg}; color: {fg}"


# ── KPIs ───────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Kpi:
    label: str
    value: str


def display_value(value: int | float | None) -> str:
    """Format a KPI number; ``None`` becomes the placeholder, never ``0``."""
    if value is None:
        return PLACEHOLDER
    if isinstance(value, float):
        return f"{value:,.1f}"
    return f"{value:,}"


def high_critical_count(summary: Summary | None) -> int:
    if summary is None:
        return 0
    sev = summary.by_severity
    return sev.get("high", 0) + sev.get("critical", 0)


def kpi_cards(summary: Summary | None) -> list[Kpi]:
    total = summary.total if summary else None
    open_ = summary.open if summary else None
    avg = summary.avg_response_minutes if summary else None
    return [
        Kpi("Total Incidents", display_value(total)),
        Kpi("Open Cases", display_value(open_)),
        Kpi("Avg Response (min)", display_value(avg)),
        Kpi("High/Critical", display_value(high_critical_count(summary))),
    ]


# ── Incidents by type ─────────────────────────────────────────────────
@dataclass(frozen=True)
class TypeBar:
    label: str
    count: int
    fraction: float


def bar_fraction(count: int, total: int | None) -> float:
    return min(1.0, count / max(1, total or 0))


def type_bars(summary: Summary | None) -> list[TypeBar]:
    if summary is None:
        return []
    return [
        TypeBar(label, count, bar_fraction(count, summary.total))
        for label, count in summary.by_type.items()
    ]


# ── Incident table ────────────────────────────────────────────────────
@dataclass(frozen=True)
class IncidentRow:
    key: int | str
    incident_id: str
    type: str
    severity: str
    status: str
    precinct: str
    response_minutes: str
    severity_color: str
    status_color: str


def incident_rows(incidents: Iterable[Incident]) -> list[IncidentRow]:
    rows = []
    for inc in incidents:
        minutes = inc.response_minutes
        rows.append(IncidentRow(
            key=inc.id,
            incident_id=inc.incident_id or PLACEHOLDER,
            type=inc.type or PLACEHOLDER,
            severity=inc.severity or PLACEHOLDER,
            status=inc.status or PLACEHOLDER,
            precinct=inc.precinct or PLACEHOLDER,
            response_minutes=PLACEHOLDER if minutes is None else f"{minutes:g}",
            severity_color=severity_color(inc.severity),
            status_color=status_color(inc.status),
        ))
    return rows


def table_message(state: ViewState) -> str | None:
    """Placeholder for an empty table, or ``None`` when there are rows."""
    if state.incidents:
        return None
    return LOADING_MESSAGE if state.loading else EMPTY_MESSAGE
