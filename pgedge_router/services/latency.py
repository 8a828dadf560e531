# pgedge_router/services/latency.py
"""Latency sampling and reporting for newly opened connections."""

import asyncio
import logging
import random
import time
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from pgedge_router.config import Settings, get_settings
from pgedge_router.models.database import DatabaseNode
from pgedge_router.models.geo import Coordinate, RequestContext
from pgedge_router.models.latency import LatencySample
from pgedge_router.services.database import QueryableConnection
from pgedge_router.services.telemetry import TelemetryClient
from pgedge_router.utils.constants import (
    CLUSTER_ID_ENV_KEY,
    LATENCY_URL_ENV_KEY,
    TRACE_HEADERS,
)

logger = logging.getLogger("latency-reporter")


def should_sample(rate: float, rand: Callable[[], float] = random.random) -> bool:
    """Decide whether this connect call takes a latency measurement.

    Args:
        rate: Sampling probability; >= 1 always samples, <= 0 never does.
        rand: Source of uniform floats in [0, 1).

    Returns:
        True if a measurement should be taken.
    """
    if rate >= 1:
        return True
    if rate <= 0:
        return False
    return rand() < rate


def resolve_latency_endpoint(
    env: Mapping[str, str],
    settings: Optional[Settings] = None
) -> Optional[str]:
    """Find where latency samples should be sent.

    An explicit URL wins, then a URL derived from the cluster id.

    Args:
        env: Environment-like lookup.
        settings: Settings providing the API domain.

    Returns:
        The endpoint URL, or None when reporting is disabled.
    """
    url = env.get(LATENCY_URL_ENV_KEY)
    if url:
        return url
    cluster_id = env.get(CLUSTER_ID_ENV_KEY)
    if cluster_id:
        return (settings or get_settings()).get_latency_url(cluster_id)
    return None


def extract_trace_id(request: Optional[RequestContext]) -> Optional[str]:
    """Get a correlation id from the request headers, if one is present."""
    if request is None:
        return None
    for header in TRACE_HEADERS:
        value = request.get_header(header)
        if value:
            return value
    return None


def build_location_payload(
    location: Coordinate,
    request: Optional[RequestContext] = None
) -> dict[str, Any]:
    """Combine the resolved coordinate with request geo enrichment."""
    payload: dict[str, Any] = dict(request.geo) if request else {}
    payload["latitude"] = location.latitude
    payload["longitude"] = location.longitude
    return payload


async def measure_latency(
    conn: QueryableConnection,
    query: str = "SELECT NOW()",
    clock: Callable[[], float] = time.perf_counter
) -> tuple[float, dict[str, Any]]:
    """Time one round trip of a trivial query.

    Args:
        conn: An open connection.
        query: Latency query returning the server time.
        clock: Monotonic clock in seconds.

    Returns:
        A tuple of (latency_seconds, meta). ``meta["result"]`` holds the
        server timestamp in ISO-8601 when exactly one row came back.
    """
    start = clock()
    rows = await conn.fetch(query)
    elapsed = clock() - start

    result = None
    if rows is not None and len(rows) == 1:
        value = rows[0][0]
        if isinstance(value, datetime):
            result = value.isoformat()

    return elapsed, {"query": query, "result": result}


class LatencyReporter:
    """Measures and ships latency samples without ever failing the caller.

    The latency query always completes before control returns to the caller.
    Only delivery may be detached (``settings.telemetry_background``).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        telemetry: Optional[TelemetryClient] = None,
        rand: Callable[[], float] = random.random,
        clock: Callable[[], float] = time.perf_counter
    ):
        """Initialize the reporter.

        Args:
            settings: Settings (query text, client name, background delivery).
            telemetry: Client used to deliver samples.
            rand: Source of uniform floats for sampling decisions.
            clock: Monotonic clock used to time the latency query.
        """
        self.settings = settings or get_settings()
        self.telemetry = telemetry or TelemetryClient(
            timeout=self.settings.telemetry_timeout,
            user_agent=self.settings.client_name
        )
        self.rand = rand
        self.clock = clock
        self._pending: set[asyncio.Task] = set()

    async def measure(
        self,
        conn: QueryableConnection,
        node: DatabaseNode,
        location: Coordinate,
        request: Optional[RequestContext] = None
    ) -> Optional[LatencySample]:
        """Time the latency query and build a sample.

        Returns:
            The sample, or None if the latency query failed.
        """
        try:
            value, meta = await measure_latency(conn, self.settings.latency_query, self.clock)
        except Exception as e:
            logger.warning("Latency query on node %s failed: %s", node.id, e)
            return None

        trace_id = extract_trace_id(request)
        if trace_id:
            meta["trace_id"] = trace_id

        return LatencySample(
            node_id=node.id,
            value=value,
            time=datetime.now(timezone.utc),
            location=build_location_payload(location, request),
            source=self.settings.client_name,
            meta=meta
        )

    async def deliver(self, url: str, sample: LatencySample) -> bool:
        """Send a sample as a single-element batch.

        Returns:
            True if the endpoint accepted it.
        """
        try:
            await self.telemetry.send(url, [sample.to_payload()])
        except Exception as e:
            logger.warning("Latency report for node %s failed: %s", sample.node_id, e)
            return False

        logger.debug("Reported latency %.6fs for node %s", sample.value, sample.node_id)
        return True

    async def report(
        self,
        conn: QueryableConnection,
        node: DatabaseNode,
        location: Coordinate,
        url: str,
        request: Optional[RequestContext] = None
    ) -> Optional[LatencySample]:
        """Measure one round trip and deliver it.

        Never raises. In background mode the sample is returned before
        delivery has finished.

        Returns:
            The measured sample, or None if the latency query failed.
        """
        sample = await self.measure(conn, node, location, request)
        if sample is None:
            return None

        if self.settings.telemetry_background:
            task = asyncio.create_task(self.deliver(url, sample))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)
        else:
            await self.deliver(url, sample)
        return sample

    async def maybe_report(
        self,
        conn: QueryableConnection,
        node: DatabaseNode,
        location: Coordinate,
        url: str,
        rate: float,
        request: Optional[RequestContext] = None
    ) -> Optional[LatencySample]:
        """Report latency if the sampling draw says so."""
        if not should_sample(rate, self.rand):
            logger.debug("Skipping latency sample (rate=%s)", rate)
            return None
        return await self.report(conn, node, location, url, request)

    async def drain(self) -> None:
        """Wait for background deliveries to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending))
