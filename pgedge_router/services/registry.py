# pgedge_router/services/registry.py
"""Database node registry loaded from an environment-like lookup."""

import json
import logging
from collections.abc import Mapping

from pydantic import TypeAdapter

from pgedge_router.models.database import DatabaseNode
from pgedge_router.utils.constants import NODES_ENV_KEY
from pgedge_router.utils.exceptions import ConfigurationError

logger = logging.getLogger("node-registry")

_node_list = TypeAdapter(list[DatabaseNode])


def load_nodes(env: Mapping[str, str], key: str = NODES_ENV_KEY) -> list[DatabaseNode]:
    """Parse the list of database nodes from a lookup.

    Args:
        env: Environment-like mapping holding the node configuration.
        key: Key the JSON array of nodes is stored under.

    Returns:
        Nodes in configuration order.

    Raises:
        ConfigurationError: If the value is missing, not JSON, not an array
            or an empty array.
        pydantic.ValidationError: If an individual node record is malformed.
    """
    raw = env.get(key)
    if not raw:
        raise ConfigurationError(f"{key} is not set", key=key)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{key} is not valid JSON", key=key) from e

    if not isinstance(data, list):
        raise ConfigurationError(f"{key} is not an array", key=key)
    if len(data) == 0:
        raise ConfigurationError(f"{key} array is empty", key=key)

    nodes = _node_list.validate_python(data)
    logger.debug("Loaded %d database nodes from %s", len(nodes), key)
    return nodes
