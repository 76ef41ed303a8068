"""Telemetry event model."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class TelemetryEvent(BaseModel):
    """A single usage event, serialized as one JSON line."""

    model_config = {"extra": "forbid"}

    name: str
    tags: dict[str, str] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    sprout_version: str
