"""Facet selections and their translation into an incident-list query."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

# ── Facet catalogs ─────────────────────────────────────────────────────
INCIDENT_TYPES = (
    "theft", "assault", "burglary", "fraud", "vandalism",
    "traffic", "narcotics", "disturbance", "other",
)
SEVERITIES = ("low", "medium", "high", "critical")
STATUSES = ("reported", "dispatched", "on_scene", "resolved", "closed")
PRECINCTS = ("Central", "North", "South", "East", "West")

# Selectbox options per facet; the "All ..." entry means no constraint.
FACET_OPTIONS: dict[str, tuple[str, tuple[str, ...]]] = {
    "type": ("All Types", INCIDENT_TYPES),
    "severity": ("All Severities", SEVERITIES),
    "status": ("All Statuses", STATUSES),
    "precinct": ("All Precincts", PRECINCTS),
}


@dataclass(frozen=True)
class FilterState:
    """Current facet selections. Empty string means "any"."""

    type: str = ""
    severity: str = ""
    status: str = ""
    precinct: str = ""

    def with_field(self, name: str, value: str) -> FilterState:
        if name not in FACETS:
            raise ValueError(f"unknown facet: {name!r}")
        return replace(self, **{name: value})


# Declaration order doubles as query order.
FACETS: tuple[str, ...] = tuple(f.name for f in fields(FilterState))


def to_query(filters: FilterState) -> list[tuple[str, str]]:
    """Non-empty facets as ordered ``(key, value)`` pairs."""
    pairs: list[tuple[str, str]] = []
    for name in FACETS:
        value = getattr(filters, name)
        if value:
            pairs.append((name, value))
    return pairs


def option_value(facet: str, label: str) -> str:
    """Map a selectbox label back to a filter value ("All ..." -> empty)."""
    all_label, _ = FACET_OPTIONS[facet]
    return "" if label == all_label else label


def option_labels(facet: str) -> list[str]:
    all_label, values = FACET_OPTIONS[facet]
    return [all_label, *values]
