# pgedge_router/utils/exceptions.py
"""Exception classes for pgedge-router."""

from pgedge_router.utils.constants import ErrorCode, ERROR_MESSAGES


class PgEdgeRouterError(Exception):
    """Base exception class for pgedge-router."""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict | None = None
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "Unknown error")
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(PgEdgeRouterError):
    """Node configuration is missing, malformed or empty."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(
            code=ErrorCode.CONFIGURATION_ERROR,
            message=message,
            details={"key": key} if key else None
        )


class InvalidOptionsError(ConfigurationError):
    """Connect options do not describe a usable node source."""

    def __init__(self, reason: str):
        super().__init__(message=f"invalid options: {reason}")
        self.code = ErrorCode.INVALID_OPTIONS


class SelectionInvariantError(PgEdgeRouterError):
    """Closest-node selection was asked to choose from nothing."""

    def __init__(self, message: str | None = None):
        super().__init__(
            code=ErrorCode.SELECTION_INVARIANT,
            message=message
        )


class TelemetryDeliveryError(PgEdgeRouterError):
    """Latency sample could not be measured or delivered."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(
            code=ErrorCode.TELEMETRY_DELIVERY_FAILED,
            message=message,
            details={"url": url} if url else None
        )
