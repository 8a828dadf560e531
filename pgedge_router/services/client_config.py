# pgedge_router/services/client_config.py
"""Driver configuration for a selected node."""

from typing import Any, Optional

from pgedge_router.models.database import DatabaseNode


def build_connection_config(
    node: DatabaseNode,
    overrides: Optional[dict[str, Any]] = None
) -> dict[str, Any]:
    """Merge caller configuration with a node's connection attributes.

    Address and credentials always come from the node; every other caller
    key passes through unchanged.

    Args:
        node: The selected node.
        overrides: Extra driver options (ssl, timeouts, ...).

    Returns:
        Keyword arguments for the database connector.
    """
    conn = node.connection
    config = dict(overrides or {})
    config.update(
        host=conn.host,
        port=conn.port,
        user=conn.username,
        password=conn.password,
        database=conn.database,
    )
    return config
