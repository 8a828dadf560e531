# pgedge_router/main.py
"""Command line entry point for pgedge-router."""

import asyncio
import logging
import os
import sys
from typing import Optional

import asyncpg
from pydantic import ValidationError

from pgedge_router.config import Settings
from pgedge_router.models.geo import Coordinate, CoordinateInput, parse_coordinate
from pgedge_router.services.connect import ConnectOptions, EnvNodeSource, connect
from pgedge_router.services.database import close_connection
from pgedge_router.services.latency import LatencyReporter, measure_latency
from pgedge_router.services.registry import load_nodes
from pgedge_router.services.selector import rank_nodes
from pgedge_router.utils.exceptions import ConfigurationError


logger = logging.getLogger("pgedge_router")


def print_ranking(location: Coordinate) -> None:
    """Print every configured node with its distance, nearest first.

    Args:
        location: Client coordinate.
    """
    nodes = load_nodes(os.environ)
    print(f"Client location: ({location.latitude}, {location.longitude})")
    for index, (node, distance) in enumerate(rank_nodes(nodes, location)):
        marker = "*" if index == 0 else " "
        label = node.name or node.id or node.connection.host
        print(f"{marker} {label:<24} {node.connection.host:<32} {distance:10.1f} km")


async def run_connect(
    settings: Settings,
    location: Coordinate,
    sample_rate: Optional[float]
) -> None:
    """Connect to the nearest node and time one latency query.

    Args:
        settings: Library settings.
        location: Client coordinate.
        sample_rate: Latency reporting rate for this call.
    """
    reporter = LatencyReporter(settings=settings)
    options = ConnectOptions(
        source=EnvNodeSource(os.environ),
        location=location,
        latency_sample_rate=sample_rate
    )
    conn = await connect(options, reporter=reporter, settings=settings)
    try:
        latency, meta = await measure_latency(conn, settings.latency_query)
        print(f"Connected; {meta['query']} took {latency * 1000:.2f} ms (server time {meta['result']})")
    finally:
        await close_connection(conn)
        await reporter.drain()


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    import argparse

    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Select the pgEdge node closest to a location"
    )
    parser.add_argument(
        "--lat",
        type=str,
        help="Client latitude (defaults to PGEDGE_DEFAULT_LATITUDE)"
    )
    parser.add_argument(
        "--lon",
        type=str,
        help="Client longitude (defaults to PGEDGE_DEFAULT_LONGITUDE)"
    )
    parser.add_argument(
        "--connect",
        action="store_true",
        help="Open a connection to the selected node and time a latency query"
    )
    parser.add_argument(
        "--sample-rate",
        type=float,
        default=None,
        help="Latency reporting rate used with --connect"
    )

    args = parser.parse_args(argv)

    default = Coordinate(
        latitude=settings.default_latitude,
        longitude=settings.default_longitude
    )
    location = parse_coordinate(CoordinateInput(latitude=args.lat, longitude=args.lon), default)

    try:
        print_ranking(location)
        if args.connect:
            asyncio.run(run_connect(settings, location, args.sample_rate))
    except ConfigurationError as e:
        logger.error("%s", e.message)
        return 2
    except ValidationError as e:
        logger.error("Malformed node record: %s", e)
        return 2
    except (OSError, asyncpg.PostgresError) as e:
        logger.error("Connection failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
