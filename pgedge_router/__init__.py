"""Client-side routing to the nearest pgEdge database node."""

from pgedge_router.models import Coordinate, CoordinateInput, DatabaseNode, RequestContext
from pgedge_router.services import (
    ConnectOptions,
    EnvNodeSource,
    StaticNodeSource,
    build_connection_config,
    connect,
    get_closest_node,
    haversine_distance,
    load_nodes,
)
from pgedge_router.utils import ConfigurationError, InvalidOptionsError, SelectionInvariantError

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "CoordinateInput",
    "DatabaseNode",
    "RequestContext",
    "ConnectOptions",
    "EnvNodeSource",
    "StaticNodeSource",
    "build_connection_config",
    "connect",
    "get_closest_node",
    "haversine_distance",
    "load_nodes",
    "ConfigurationError",
    "InvalidOptionsError",
    "SelectionInvariantError",
]
