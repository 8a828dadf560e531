# pgedge_router/utils/constants.py
"""Constants for pgedge-router."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error code enumeration."""

    CONFIGURATION_ERROR = "ERR_001"
    INVALID_OPTIONS = "ERR_002"
    SELECTION_INVARIANT = "ERR_003"
    TELEMETRY_DELIVERY_FAILED = "ERR_004"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.SELECTION_INVARIANT: "No nodes provided",
}

# Well-known lookup keys
NODES_ENV_KEY = "PGEDGE_NODES"
LATENCY_URL_ENV_KEY = "PGEDGE_LATENCY_URL"
CLUSTER_ID_ENV_KEY = "PGEDGE_CLUSTER_ID"

LATENCY_URL_TEMPLATE = "https://api.{domain}/clusters/{cluster_id}/views/latency-measurements"

# Checked in order when looking for a correlation id on the request
TRACE_HEADERS = ("traceparent", "x-request-id", "cf-ray")

EARTH_RADIUS_KM = 6371.0
