"""Tests for configuration management."""

from pgedge_router.config import Settings


class TestSettings:
    """Settings test suite."""

    def test_default_values(self, monkeypatch):
        """Test default configuration values."""
        for name in ("PGEDGE_DEFAULT_LATITUDE", "PGEDGE_DEFAULT_LONGITUDE", "PGEDGE_API_DOMAIN"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.default_latitude == 38.88
        assert settings.default_longitude == -77.04
        assert settings.api_domain == "pgedge.com"
        assert settings.latency_query == "SELECT NOW()"
        assert settings.telemetry_background is False

    def test_env_prefix(self, monkeypatch):
        """Test values are read from PGEDGE_ prefixed variables."""
        monkeypatch.setenv("PGEDGE_DEFAULT_LATITUDE", "51.5")
        monkeypatch.setenv("PGEDGE_TELEMETRY_BACKGROUND", "true")
        settings = Settings()
        assert settings.default_latitude == 51.5
        assert settings.telemetry_background is True

    def test_node_list_is_not_a_setting(self, monkeypatch, nodes_json):
        """Test that the node list variable does not break settings loading."""
        monkeypatch.setenv("PGEDGE_NODES", nodes_json)
        settings = Settings()
        assert not hasattr(settings, "nodes")

    def test_latency_url(self):
        """Test the cluster latency URL template."""
        settings = Settings(api_domain="example.dev")
        url = settings.get_latency_url("c-123")
        assert url == "https://api.example.dev/clusters/c-123/views/latency-measurements"
