# pgedge_router/services/geo.py
"""Great-circle distance between coordinates."""

import math

from pgedge_router.models.geo import Coordinate
from pgedge_router.utils.constants import EARTH_RADIUS_KM


def haversine_distance(a: Coordinate, b: Coordinate) -> float:
    """Return the great-circle distance in km between two coordinates.

    Args:
        a: First coordinate.
        b: Second coordinate.

    Returns:
        Distance in kilometers on a sphere of the Earth's mean radius.
    """
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))
