# pgedge_router/services/selector.py
"""Nearest-node selection."""

from typing import Sequence

from pgedge_router.models.database import DatabaseNode
from pgedge_router.models.geo import Coordinate
from pgedge_router.services.geo import haversine_distance
from pgedge_router.utils.exceptions import SelectionInvariantError


def get_closest_node(nodes: Sequence[DatabaseNode], location: Coordinate) -> DatabaseNode:
    """Get the node closest to a location.

    Ties go to the node that appears first.

    Args:
        nodes: Candidate nodes.
        location: Client coordinate.

    Returns:
        The node with the smallest great-circle distance to ``location``.

    Raises:
        SelectionInvariantError: If ``nodes`` is empty.
    """
    if len(nodes) == 0:
        raise SelectionInvariantError()

    closest_node = nodes[0]
    closest_distance = haversine_distance(location, closest_node.location)
    for node in nodes[1:]:
        distance = haversine_distance(location, node.location)
        if distance < closest_distance:
            closest_node = node
            closest_distance = distance
    return closest_node


def rank_nodes(
    nodes: Sequence[DatabaseNode],
    location: Coordinate
) -> list[tuple[DatabaseNode, float]]:
    """Pair every node with its distance to a location, nearest first."""
    ranked = [(node, haversine_distance(location, node.location)) for node in nodes]
    # sorted() is stable, so equal distances keep configuration order
    return sorted(ranked, key=lambda pair: pair[1])
