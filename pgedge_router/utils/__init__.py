"""Utility modules for pgedge-router."""

from pgedge_router.utils.constants import (
    ErrorCode,
    ERROR_MESSAGES,
    NODES_ENV_KEY,
    LATENCY_URL_ENV_KEY,
    CLUSTER_ID_ENV_KEY,
)
from pgedge_router.utils.exceptions import (
    PgEdgeRouterError,
    ConfigurationError,
    InvalidOptionsError,
    SelectionInvariantError,
    TelemetryDeliveryError,
)

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "NODES_ENV_KEY",
    "LATENCY_URL_ENV_KEY",
    "CLUSTER_ID_ENV_KEY",
    "PgEdgeRouterError",
    "ConfigurationError",
    "InvalidOptionsError",
    "SelectionInvariantError",
    "TelemetryDeliveryError",
]
