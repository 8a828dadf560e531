# pgedge_router/models/latency.py
"""Latency measurement data models."""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Any


class LatencySample(BaseModel):
    """One measured query round trip against a node."""

    node_id: str
    value: float = Field(..., description="Round-trip time in seconds")
    time: datetime
    location: dict[str, Any] = Field(default_factory=dict)
    source: str
    meta: dict[str, Any] = Field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the telemetry endpoint (datetimes as ISO-8601)."""
        return self.model_dump(mode="json")
