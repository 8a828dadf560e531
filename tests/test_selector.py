"""Tests for nearest-node selection."""

import pytest

from pgedge_router.models.database import Connection, DatabaseNode
from pgedge_router.models.geo import Coordinate
from pgedge_router.services.registry import load_nodes
from pgedge_router.services.selector import get_closest_node, rank_nodes
from pgedge_router.utils.exceptions import SelectionInvariantError


def make_node(node_id, lat, lon):
    return DatabaseNode(
        id=node_id,
        connection=Connection(host=f"{node_id}.example", username="u", database="d"),
        location=Coordinate(latitude=lat, longitude=lon),
    )


class TestGetClosestNode:
    """get_closest_node test suite."""

    @pytest.mark.parametrize(
        "lat, lon, expected",
        [
            (0, 0, 0),
            (-5, -5, 0),
            (90, 0, 1),
            (88, -28, 1),
        ],
    )
    def test_two_nodes(self, env, lat, lon, expected):
        """Test selection between the two fixture nodes."""
        nodes = load_nodes(env)
        closest = get_closest_node(nodes, Coordinate(latitude=lat, longitude=lon))
        assert closest is nodes[expected]

    def test_empty_nodes(self):
        """Test that selecting from nothing fails."""
        with pytest.raises(SelectionInvariantError):
            get_closest_node([], Coordinate(latitude=0, longitude=0))

    def test_single_node(self):
        """Test that a single node is always selected."""
        node = make_node("only", 50, 50)
        assert get_closest_node([node], Coordinate(latitude=-50, longitude=-130)) is node

    def test_tie_goes_to_first(self):
        """Test that equidistant nodes resolve to the earliest one."""
        east = make_node("east", 0, 10)
        west = make_node("west", 0, -10)
        origin = Coordinate(latitude=0, longitude=0)
        assert get_closest_node([east, west], origin) is east
        assert get_closest_node([west, east], origin) is west

    def test_identical_locations(self):
        """Test duplicates at the same coordinate keep input order."""
        a = make_node("dup", 10, 10)
        b = make_node("dup", 10, 10)
        assert get_closest_node([a, b], Coordinate(latitude=0, longitude=0)) is a


class TestRankNodes:
    """rank_nodes test suite."""

    def test_sorted_by_distance(self):
        """Test that nodes come back nearest first."""
        far = make_node("far", -40, 170)
        near = make_node("near", 39, -77)
        mid = make_node("mid", 51, 0)
        ranked = rank_nodes([far, near, mid], Coordinate(latitude=38.88, longitude=-77.04))
        assert [node.id for node, _ in ranked] == ["near", "mid", "far"]
        distances = [d for _, d in ranked]
        assert distances == sorted(distances)

    def test_first_matches_closest(self, env):
        """Test that the top ranked node is the selected node."""
        nodes = load_nodes(env)
        location = Coordinate(latitude=88, longitude=-28)
        assert rank_nodes(nodes, location)[0][0] is get_closest_node(nodes, location)

    def test_ties_keep_order(self):
        """Test that the sort is stable."""
        east = make_node("east", 0, 10)
        west = make_node("west", 0, -10)
        ranked = rank_nodes([west, east], Coordinate(latitude=0, longitude=0))
        assert [node.id for node, _ in ranked] == ["west", "east"]

    def test_empty(self):
        """Test that ranking nothing gives nothing."""
        assert rank_nodes([], Coordinate(latitude=0, longitude=0)) == []
