"""Data models for pgedge-router."""

from pgedge_router.models.geo import (
    Coordinate,
    CoordinateInput,
    RequestContext,
    parse_coordinate,
)
from pgedge_router.models.database import (
    Region,
    Connection,
    DatabaseNode,
)
from pgedge_router.models.latency import LatencySample

__all__ = [
    "Coordinate",
    "CoordinateInput",
    "RequestContext",
    "parse_coordinate",
    "Region",
    "Connection",
    "DatabaseNode",
    "LatencySample",
]
