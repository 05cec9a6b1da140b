"""Type definitions for flight finder records.

This module provides TypedDict definitions for the raw records exchanged
with the outside world: airports and events as read from their sources,
flights as written to the result file, and the run summary.

Example:
    >>> from flight_finder.types import EventRecord
    >>> event: EventRecord = {
    ...     "identifier": "A1B2C3",
    ...     "timestamp": "2025-03-15T10:00:00Z",
    ...     "latitude": 47.45,
    ...     "longitude": -122.31,
    ...     "altitude": 1200.0,
    ... }
"""

from typing import TypedDict, List, Optional, Union
from typing_extensions import NotRequired


class AirportRecord(TypedDict):
    """Airport as stored in the airport source (elevation in feet)."""

    identifier: str
    latitude: float
    longitude: float
    elevation: int


class EventRecord(TypedDict):
    """ADS-B event as stored in the event source (altitude in feet)."""

    identifier: str
    timestamp: Union[str, float]  # ISO 8601 string or Unix epoch seconds
    latitude: NotRequired[Optional[float]]
    longitude: NotRequired[Optional[float]]
    altitude: NotRequired[Optional[float]]


class FlightRecord(TypedDict):
    """Detected flight as written to the result file."""

    aircraft_identifier: str
    departure_time: Optional[str]
    departure_airport: Optional[str]
    arrival_time: Optional[str]
    arrival_airport: Optional[str]


class AirportMovements(TypedDict):
    """Departures and arrivals counted for one airport."""

    identifier: str
    departures: int
    arrivals: int
    total: int


class RunStatistics(TypedDict):
    """Summary of one segmentation run."""

    num_aircraft: int
    num_events: int
    num_flights: int
    complete_flights: int
    departure_only_flights: int
    arrival_only_flights: int
    busiest_airports: List[AirportMovements]
    average_flight_time_seconds: NotRequired[float]
    average_flight_time_str: NotRequired[str]


__all__ = [
    "AirportRecord",
    "EventRecord",
    "FlightRecord",
    "AirportMovements",
    "RunStatistics",
]
