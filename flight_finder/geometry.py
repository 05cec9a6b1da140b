"""Geographic points, distances and grid cells."""

from dataclasses import dataclass
from math import radians, sin, cos, sqrt, atan2, floor
from typing import Optional, Tuple

# Constants
EARTH_RADIUS_KM = 6371


def haversine_distance(lat1, lon1, lat2, lon2):
    """Calculate great circle distance in kilometers between two points."""
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = sin(dlat/2)**2 + cos(lat1) * cos(lat2) * sin(dlon/2)**2
    c = 2 * atan2(sqrt(a), sqrt(1-a))
    return EARTH_RADIUS_KM * c


def grid_cell(latitude: float, longitude: float) -> Tuple[int, int]:
    """Whole-degree grid cell containing a coordinate.

    Uses floor rather than truncation so cells west of Greenwich and south
    of the equator are the same size as all others.

    Example:
        >>> grid_cell(50.9, -0.5)
        (50, -1)
    """
    return (floor(latitude), floor(longitude))


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in degrees, either of which may be unknown."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def is_valid(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def cell(self) -> Optional[Tuple[int, int]]:
        if not self.is_valid:
            return None
        return grid_cell(self.latitude, self.longitude)

    def distance_to(self, other: "GeoPoint") -> float:
        """
        Great circle distance to another point.

        Args:
            other: Point to measure to

        Returns:
            Distance in kilometers

        Raises:
            ValueError: If either point is missing a coordinate
        """
        if not (self.is_valid and other.is_valid):
            raise ValueError(f"Cannot measure distance between {self} and {other}")
        return haversine_distance(self.latitude, self.longitude, other.latitude, other.longitude)

    def __str__(self) -> str:
        if not self.is_valid:
            return "(unknown)"
        return f"({self.latitude}, {self.longitude})"
