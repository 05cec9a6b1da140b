"""Statistics calculation for a segmentation run."""

from collections import Counter
from typing import Dict, List, Optional
from .constants import TOP_AIRPORTS_COUNT
from .helpers import format_flight_time
from .models import Aircraft, Flight
from .types import AirportMovements, RunStatistics


def busiest_airports(flights: List[Flight], limit: int = TOP_AIRPORTS_COUNT) -> List[AirportMovements]:
    """
    Rank airports by number of detected departures plus arrivals.

    Args:
        flights: Detected flights
        limit: Maximum number of airports to return

    Returns:
        Airport movement counts, busiest first (ties by identifier)
    """
    departures = Counter(f.departure_airport for f in flights if f.departure_airport)
    arrivals = Counter(f.arrival_airport for f in flights if f.arrival_airport)

    movements = [
        {
            'identifier': identifier,
            'departures': departures[identifier],
            'arrivals': arrivals[identifier],
            'total': departures[identifier] + arrivals[identifier],
        }
        for identifier in set(departures) | set(arrivals)
    ]
    movements.sort(key=lambda m: (-m['total'], m['identifier']))
    return movements[:limit]


def calculate_statistics(
    flights: List[Flight],
    all_aircraft: Optional[Dict[str, Aircraft]] = None
) -> RunStatistics:
    """
    Calculate summary statistics for detected flights.

    Args:
        flights: Detected flights
        all_aircraft: Aircraft the flights were detected from (optional)

    Returns:
        Dictionary of statistics
    """
    all_aircraft = all_aircraft or {}

    stats = {
        'num_aircraft': len(all_aircraft),
        'num_events': sum(len(aircraft.events) for aircraft in all_aircraft.values()),
        'num_flights': len(flights),
        'complete_flights': sum(1 for f in flights if f.is_complete),
        'departure_only_flights': sum(1 for f in flights if f.has_departure and not f.has_arrival),
        'arrival_only_flights': sum(1 for f in flights if f.has_arrival and not f.has_departure),
        'busiest_airports': busiest_airports(flights),
    }

    # Only complete flights that move forward in time have a duration
    durations = [
        (f.arrival_time - f.departure_time).total_seconds()
        for f in flights
        if f.is_complete and f.arrival_time > f.departure_time
    ]
    if durations:
        average = sum(durations) / len(durations)
        stats['average_flight_time_seconds'] = average
        stats['average_flight_time_str'] = format_flight_time(average)

    return stats
