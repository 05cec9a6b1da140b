"""Airport, event, aircraft and flight records.

Airports and events are read once and never change, so they are frozen
dataclasses. Flights are frozen as well: the segmenter derives a new
Flight for every endpoint it assigns instead of mutating one in place.
Optional fields use ``None`` for "unknown"; there are no sentinel values.

Example:
    >>> flight = Flight("A1B2C3")
    >>> flight.has_endpoint
    False
    >>> flight = flight.with_departure(datetime(2025, 3, 15, 10, 0), "KSEA")
    >>> flight.has_departure, flight.has_arrival
    (True, False)
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional

from .geometry import GeoPoint

__all__ = [
    "Airport",
    "Event",
    "Aircraft",
    "Flight",
]


@dataclass(frozen=True)
class Airport:
    """A known airport; elevation in feet."""

    identifier: str
    location: GeoPoint
    elevation: int

    def __str__(self) -> str:
        return f"{self.identifier} {self.location}"


@dataclass(frozen=True)
class Event:
    """A single ADS-B report; altitude in feet."""

    aircraft_identifier: str
    timestamp: datetime
    location: Optional[GeoPoint] = None
    altitude: Optional[float] = None

    @property
    def has_location(self) -> bool:
        return self.location is not None and self.location.is_valid

    @property
    def has_altitude(self) -> bool:
        return self.altitude is not None


@dataclass
class Aircraft:
    """All events reported under one aircraft identifier, in arrival order."""

    identifier: str
    events: List[Event] = field(default_factory=list)


@dataclass(frozen=True)
class Flight:
    """A detected flight; either endpoint may be unknown."""

    aircraft_identifier: str
    departure_time: Optional[datetime] = None
    departure_airport: Optional[str] = None
    arrival_time: Optional[datetime] = None
    arrival_airport: Optional[str] = None

    @property
    def has_departure(self) -> bool:
        return self.departure_time is not None

    @property
    def has_arrival(self) -> bool:
        return self.arrival_time is not None

    @property
    def has_endpoint(self) -> bool:
        return self.has_departure or self.has_arrival

    @property
    def is_complete(self) -> bool:
        return self.has_departure and self.has_arrival

    def with_departure(self, timestamp: datetime, airport_id: Optional[str]) -> "Flight":
        return replace(self, departure_time=timestamp, departure_airport=airport_id)

    def with_arrival(self, timestamp: datetime, airport_id: Optional[str]) -> "Flight":
        return replace(self, arrival_time=timestamp, arrival_airport=airport_id)
