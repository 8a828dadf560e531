# pgedge_router/services/telemetry.py
"""HTTP delivery of latency samples."""

import logging
from typing import Any, Optional

import httpx

from pgedge_router.utils.exceptions import TelemetryDeliveryError

logger = logging.getLogger("telemetry")


class TelemetryClient:
    """Posts JSON payloads to a telemetry endpoint."""

    def __init__(
        self,
        timeout: float = 5.0,
        user_agent: str = "pgedge-python",
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the telemetry client.

        Args:
            timeout: Request timeout in seconds.
            user_agent: Value of the User-Agent header.
            transport: Optional httpx transport (tests use ``httpx.MockTransport``).
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    async def send(self, url: str, payload: Any) -> int:
        """POST a payload as JSON.

        Args:
            url: Telemetry endpoint.
            payload: JSON-serializable body.

        Returns:
            The response status code.

        Raises:
            TelemetryDeliveryError: On timeouts, transport errors or a
                non-success status.
        """
        headers = {"User-Agent": self.user_agent}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise TelemetryDeliveryError(
                f"Telemetry request timed out after {self.timeout} seconds", url=url
            ) from e
        except httpx.HTTPStatusError as e:
            raise TelemetryDeliveryError(
                f"Telemetry request failed with status {e.response.status_code}", url=url
            ) from e
        except httpx.HTTPError as e:
            raise TelemetryDeliveryError(f"Telemetry request failed: {e}", url=url) from e

        logger.debug("Delivered telemetry to %s (HTTP %d)", url, response.status_code)
        return response.status_code
