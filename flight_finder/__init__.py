"""
Flight Finder

Reconstructs probable flights from ADS-B position reports and a list of
known airports.
"""

__version__ = "1.0.0"

# Export key functions
from .geometry import GeoPoint, haversine_distance, grid_cell
from .models import Airport, Event, Aircraft, Flight
from .airports import AirportIndex
from .aircraft import group_events_by_aircraft, working_sequence
from .trend import Trend, classify_trend
from .segmenter import segment_events, segment_aircraft, find_flights
from .parser import load_airports, load_events
from .exporter import flight_to_record, export_flights
from .statistics import calculate_statistics
from .exceptions import (
    FlightFinderError,
    MissingSourceError,
    MalformedRecordError,
    ConfigurationError,
)

__all__ = [
    # Geometry
    "GeoPoint",
    "haversine_distance",
    "grid_cell",
    # Models
    "Airport",
    "Event",
    "Aircraft",
    "Flight",
    # Airports
    "AirportIndex",
    # Aircraft
    "group_events_by_aircraft",
    "working_sequence",
    # Trend
    "Trend",
    "classify_trend",
    # Segmenter
    "segment_events",
    "segment_aircraft",
    "find_flights",
    # Parser
    "load_airports",
    "load_events",
    # Exporter
    "flight_to_record",
    "export_flights",
    # Statistics
    "calculate_statistics",
    # Exceptions
    "FlightFinderError",
    "MissingSourceError",
    "MalformedRecordError",
    "ConfigurationError",
]
