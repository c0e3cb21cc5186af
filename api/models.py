"""Pydantic models for the analytics API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Incident(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | str
    incident_id: str | None = None
    type: str | None = None
    severity: str | None = None
    status: str | None = None
    precinct: str | None = None
    response_minutes: float | None = Field(None, ge=0)


class Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int | None = Field(None, ge=0)
    open: int | None = Field(None, ge=0)
    avg_response_minutes: float | None = None
    by_type: dict[str, int] = Field(default_factory=dict)
    by_severity: dict[str, int] = Field(default_factory=dict)

    @field_validator("by_type", "by_severity", mode="before")
    @classmethod
    def _null_counts(cls, v):
        return {} if v is None else v


class IncidentList(BaseModel):
    items: list[Incident] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, v):
        return [] if v is None else v
