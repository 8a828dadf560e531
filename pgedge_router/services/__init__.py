"""Service modules for pgedge-router."""

from pgedge_router.services.geo import haversine_distance
from pgedge_router.services.registry import load_nodes
from pgedge_router.services.selector import get_closest_node, rank_nodes
from pgedge_router.services.client_config import build_connection_config
from pgedge_router.services.database import (
    open_connection,
    close_connection,
)
from pgedge_router.services.telemetry import TelemetryClient
from pgedge_router.services.latency import (
    LatencyReporter,
    should_sample,
    resolve_latency_endpoint,
    measure_latency,
)
from pgedge_router.services.connect import (
    ConnectOptions,
    EnvNodeSource,
    StaticNodeSource,
    connect,
)

__all__ = [
    # Geo
    "haversine_distance",
    # Nodes
    "load_nodes",
    "get_closest_node",
    "rank_nodes",
    "build_connection_config",
    # Database
    "open_connection",
    "close_connection",
    # Latency
    "TelemetryClient",
    "LatencyReporter",
    "should_sample",
    "resolve_latency_endpoint",
    "measure_latency",
    # Connect
    "ConnectOptions",
    "EnvNodeSource",
    "StaticNodeSource",
    "connect",
]
