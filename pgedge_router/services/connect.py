# pgedge_router/services/connect.py
"""Connect to the database node closest to the client."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from pgedge_router.config import Settings, get_settings
from pgedge_router.models.database import DatabaseNode
from pgedge_router.models.geo import (
    Coordinate,
    CoordinateInput,
    RequestContext,
    parse_coordinate,
)
from pgedge_router.services.client_config import build_connection_config
from pgedge_router.services.database import Connector, open_connection
from pgedge_router.services.latency import LatencyReporter, resolve_latency_endpoint
from pgedge_router.services.registry import load_nodes
from pgedge_router.services.selector import get_closest_node
from pgedge_router.utils.exceptions import InvalidOptionsError

logger = logging.getLogger("pgedge-connect")


@dataclass(frozen=True)
class EnvNodeSource:
    """Nodes are read from an environment-like lookup."""
    env: Mapping[str, str]


@dataclass(frozen=True)
class StaticNodeSource:
    """Nodes are supplied directly by the caller."""
    nodes: Sequence[DatabaseNode]


NodeSource = Union[EnvNodeSource, StaticNodeSource]


@dataclass
class ConnectOptions:
    """Options for a single connect call."""
    source: Optional[NodeSource] = None
    location: Union[CoordinateInput, Coordinate, Mapping, None] = None
    request: Optional[RequestContext] = None
    config: Optional[dict[str, Any]] = None
    latency_sample_rate: Optional[float] = None


def resolve_nodes(source: Optional[NodeSource]) -> list[DatabaseNode]:
    """Resolve the candidate nodes for a connect call.

    Raises:
        InvalidOptionsError: If no source is given or it yields no nodes.
        ConfigurationError: If the environment node list is malformed.
    """
    if isinstance(source, EnvNodeSource):
        nodes = load_nodes(source.env)
    elif isinstance(source, StaticNodeSource):
        nodes = list(source.nodes or [])
    else:
        raise InvalidOptionsError("env or nodes must be provided")

    if len(nodes) == 0:
        raise InvalidOptionsError("at least one node must be provided")
    return nodes


def resolve_location(options: ConnectOptions, settings: Settings) -> Coordinate:
    """Resolve the client coordinate.

    An explicit location wins over the request's geo data; the configured
    default fills in whatever is missing.
    """
    default = Coordinate(
        latitude=settings.default_latitude,
        longitude=settings.default_longitude
    )
    if options.location is not None:
        return parse_coordinate(options.location, default)
    if options.request is not None:
        return parse_coordinate(options.request.coordinate_input(), default)
    return default


async def connect(
    options: ConnectOptions,
    connector: Connector = open_connection,
    reporter: Optional[LatencyReporter] = None,
    settings: Optional[Settings] = None
) -> Any:
    """Open a connection to the node closest to the client.

    Args:
        options: Node source, location and driver options.
        connector: Async callable opening a connection from keyword config.
        reporter: Latency reporter; one is created when sampling is requested.
            With background delivery, pass your own reporter and call its
            ``drain()`` before the event loop closes.
        settings: Settings overriding the process-wide instance.

    Returns:
        The open connection returned by ``connector``.

    Raises:
        InvalidOptionsError: If the options name no usable node source.
        ConfigurationError: If environment node configuration is malformed.
    """
    settings = settings or get_settings()

    nodes = resolve_nodes(options.source)
    location = resolve_location(options, settings)
    logger.debug(
        "Resolved client location (%.4f, %.4f)",
        location.latitude, location.longitude
    )

    node = get_closest_node(nodes, location)
    logger.info(
        "Selected node %s (%s:%s) out of %d",
        node.id or node.name, node.connection.host, node.connection.port, len(nodes)
    )

    config = build_connection_config(node, options.config)
    conn = await connector(**config)

    rate = options.latency_sample_rate
    if rate is None:
        rate = settings.latency_sample_rate
    if rate > 0 and isinstance(options.source, EnvNodeSource):
        url = resolve_latency_endpoint(options.source.env, settings)
        if url:
            if reporter is None:
                reporter = LatencyReporter(settings=settings)
                if settings.telemetry_background:
                    logger.debug(
                        "Background latency delivery without a caller reporter; "
                        "pending delivery cannot be drained"
                    )
            await reporter.maybe_report(
                conn, node, location, url,
                rate=rate,
                request=options.request
            )

    return conn
