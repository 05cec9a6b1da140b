"""Nearest-airport lookup on a whole-degree spatial grid.

This module answers one question for the segmenter: which known airport
is closest to the point where an aircraft started climbing or finished
descending?

Indexing Strategy:
Uses a spatial grid approach for O(1) neighbourhood lookups:
- Divides the globe into 1 x 1 degree cells keyed by (floor(lat), floor(lon))
- Checks the point's cell + 8 neighbours for candidate airports
- Only measures distances to airports within those 9 cells

Approximation:
Airports outside the 3 x 3 neighbourhood are never returned, even when
the index holds nothing closer. A point over open ocean therefore has no
nearest airport, which the segmenter treats as "not a landing".

Performance:
- Built once from the full airport list, read-only afterwards
- Safe to query from several threads without locking
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .constants import GRID_NEIGHBOR_OFFSETS
from .geometry import GeoPoint, grid_cell
from .logger import logger
from .models import Airport

__all__ = ["AirportIndex"]


class AirportIndex:
    """Airports bucketed by whole-degree grid cell."""

    def __init__(self, airports: Iterable[Airport]):
        self._grid: Dict[Tuple[int, int], List[Airport]] = {}
        self._count = 0

        for airport in airports:
            key = grid_cell(airport.location.latitude, airport.location.longitude)
            if key not in self._grid:
                self._grid[key] = []
            self._grid[key].append(airport)
            self._count += 1

        logger.debug(f"Indexed {self._count} airports in {len(self._grid)} grid cells")

    def __len__(self) -> int:
        return self._count

    @property
    def cell_count(self) -> int:
        return len(self._grid)

    def airports_in_cell(self, cell: Tuple[int, int]) -> List[Airport]:
        return list(self._grid.get(cell, []))

    def nearest(self, point: Optional[GeoPoint]) -> Optional[Airport]:
        """
        Find the closest airport in the point's cell and its 8 neighbours.

        Args:
            point: Location to search around (may be None or missing a coordinate)

        Returns:
            Closest airport, or None if the point is invalid or no airport
            lies within the 3 x 3 cell neighbourhood. On equal distances the
            first airport examined wins.
        """
        if point is None or not point.is_valid:
            return None

        cell_lat, cell_lon = point.cell
        closest_distance = float('inf')
        closest_airport = None

        for dlat in GRID_NEIGHBOR_OFFSETS:
            for dlon in GRID_NEIGHBOR_OFFSETS:
                for airport in self._grid.get((cell_lat + dlat, cell_lon + dlon), ()):
                    distance = point.distance_to(airport.location)
                    if distance < closest_distance:
                        closest_distance = distance
                        closest_airport = airport

        return closest_airport
