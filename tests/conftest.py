"""Pytest configuration and fixtures for pgedge-router tests."""

from datetime import datetime, timezone

import pytest


TEST_NODES = """[
  {
    "connection": {
      "host": "h1",
      "port": 5432,
      "username": "u1",
      "password": "p1",
      "database": "d1"
    },
    "location": {
      "latitude": 5,
      "longitude": 10
    }
  },
  {
    "connection": {
      "host": "h2",
      "port": 5432,
      "username": "u2",
      "password": "p2",
      "database": "d2"
    },
    "location": {
      "latitude": 90,
      "longitude": -30
    }
  }
]"""

SERVER_TIME = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)


class FakeConnection:
    """Stands in for an asyncpg connection."""

    def __init__(self, config: dict, rows=None, fail_query: bool = False):
        self.config = config
        self.rows = [(SERVER_TIME,)] if rows is None else rows
        self.fail_query = fail_query
        self.queries: list[str] = []

    async def fetch(self, query: str, *args):
        self.queries.append(query)
        if self.fail_query:
            raise RuntimeError("latency query failed")
        return self.rows

    async def close(self):
        pass


class FakeConnector:
    """Records every connect call and returns FakeConnections."""

    def __init__(self, **connection_kwargs):
        self.calls: list[dict] = []
        self.connection_kwargs = connection_kwargs

    async def __call__(self, **config):
        self.calls.append(config)
        return FakeConnection(config, **self.connection_kwargs)


# Markers for test categorization
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


@pytest.fixture
def nodes_json():
    """Two-node configuration used across tests."""
    return TEST_NODES


@pytest.fixture
def env(nodes_json):
    """Environment holding the node configuration."""
    return {"PGEDGE_NODES": nodes_json}


@pytest.fixture
def connector():
    """A connector that never touches the network."""
    return FakeConnector()


@pytest.fixture
def make_connector():
    """Factory for connectors whose connections behave differently."""
    return FakeConnector


def pytest_collection_modifyitems(config, items):
    """Run integration tests last."""
    items.sort(key=lambda item: (item.get_closest_marker("integration") is not None, item.name))
