# pgedge_router/models/geo.py
"""Geographic data models and coordinate normalization."""

import math
from collections.abc import Mapping
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, Union


class Coordinate(BaseModel):
    """A latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    model_config = ConfigDict(frozen=True)


class CoordinateInput(BaseModel):
    """A loosely typed coordinate as supplied by callers or request metadata.

    Either component may be a number, a numeric string, or missing.
    """

    latitude: Any = None
    longitude: Any = None


class RequestContext(BaseModel):
    """Request-derived data used to locate the client.

    ``geo`` carries ``latitude``/``longitude`` plus optional enrichment such as
    ``country``, ``city``, ``region``, ``region_code``, ``continent``,
    ``postal_code``, ``timezone`` and ``colo``.
    """

    headers: dict[str, str] = Field(default_factory=dict)
    geo: dict[str, Any] = Field(default_factory=dict)

    def get_header(self, name: str) -> Optional[str]:
        """Look up a header case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def coordinate_input(self) -> Optional[CoordinateInput]:
        """Get the coordinate embedded in the geo data, if any."""
        if "latitude" not in self.geo and "longitude" not in self.geo:
            return None
        return CoordinateInput(
            latitude=self.geo.get("latitude"),
            longitude=self.geo.get("longitude"),
        )


def _to_degrees(value: Any, default: float) -> float:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(result):
        return default
    return result


def parse_coordinate(
    value: Union[CoordinateInput, Coordinate, Mapping, None],
    default: Coordinate
) -> Coordinate:
    """Normalize a loosely typed coordinate into a Coordinate.

    Numeric strings are converted to floats. Components that are missing,
    non-numeric or non-finite are replaced by the matching component of
    ``default``.

    Args:
        value: The coordinate to normalize.
        default: Coordinate supplying fallback components.

    Returns:
        A strictly typed Coordinate.
    """
    if value is None:
        return default
    if isinstance(value, Mapping):
        latitude, longitude = value.get("latitude"), value.get("longitude")
    else:
        latitude, longitude = value.latitude, value.longitude
    return Coordinate(
        latitude=_to_degrees(latitude, default.latitude),
        longitude=_to_degrees(longitude, default.longitude),
    )
