"""Geographic calculations - Pure functions.

This module provides the GeoPoint value type and great-circle distance
calculations for seismic event locations.
All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass

from quake_forecaster.core.errors import ParseError


# Earth's mean radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    """Immutable geographic location.

    Attributes:
        latitude: Latitude in degrees, [-90, 90]
        longitude: Longitude in degrees, [-180, 180]
        label: Free-text description of the place (may be empty)
    """
    latitude: float
    longitude: float
    label: str = ""

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude},{self.label}"

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)

    def distance_to(self, other: "GeoPoint") -> float:
        """Great-circle distance to another point in kilometers."""
        return calculate_distance(self, other)


def calculate_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in kilometers
    """
    # Convert to radians
    lat_a = math.radians(a.latitude)
    lat_b = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    # Haversine formula
    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat_a) * math.cos(lat_b) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def is_within_radius(point: GeoPoint, center: GeoPoint, radius_km: float) -> bool:
    """Check if a point lies within a radius of a center point (inclusive).

    Pure function.
    """
    return calculate_distance(point, center) <= radius_km


def _parse_coordinate(raw: str, name: str) -> float:
    """Parse one coordinate, rejecting non-numeric and non-finite text."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ParseError(f"Parse error in location {name}: {raw!r}", raw) from None

    if not math.isfinite(value):
        raise ParseError(f"Parse error in location {name}: {raw!r}", raw)

    return value


def parse_location(fields: list[str]) -> GeoPoint:
    """Parse [latitude, longitude, place] fields into a GeoPoint.

    Pure function.

    Args:
        fields: Exactly three raw text fields

    Returns:
        GeoPoint for the fields

    Raises:
        ParseError: If the field count is wrong or a coordinate is not numeric
    """
    if len(fields) != 3:
        raise ParseError(f"Parse error in location data: {fields}", fields)

    latitude, longitude, place = fields

    return GeoPoint(
        latitude=_parse_coordinate(latitude, "latitude"),
        longitude=_parse_coordinate(longitude, "longitude"),
        label=place,
    )
