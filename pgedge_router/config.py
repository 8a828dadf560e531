# pgedge_router/config.py
"""Configuration management for pgedge-router."""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional

from pgedge_router.utils.constants import LATENCY_URL_TEMPLATE


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Client location used when neither an explicit nor a request location is known
    default_latitude: float = 38.88
    default_longitude: float = -77.04

    # Latency telemetry
    api_domain: str = "pgedge.com"
    client_name: str = "pgedge-python"
    latency_query: str = "SELECT NOW()"
    latency_sample_rate: float = Field(
        default=0.0,
        description="Probability that a connect call measures and reports latency"
    )
    telemetry_timeout: float = 5.0
    telemetry_background: bool = False

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "PGEDGE_"

    def get_latency_url(self, cluster_id: str) -> str:
        """Build the latency-measurements URL for a cluster.

        Args:
            cluster_id: Cluster identifier.

        Returns:
            The canonical telemetry endpoint for the cluster.
        """
        return LATENCY_URL_TEMPLATE.format(domain=self.api_domain, cluster_id=cluster_id)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
