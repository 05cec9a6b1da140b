"""Flight segmentation from altitude trends.

This module turns one aircraft's ADS-B reports into flights by watching
the altitude climb and fall over time.

Algorithm Overview:
The working sequence (located, altitude-bearing events in time order) is
scanned in three phases:

1. Start check:
   - If the first sample climbs (first altitude below last), the aircraft
     took off at its first report; a departure is recorded there.

2. Middle scan:
   - A window of SAMPLE_SIZE events slides forward WINDOW_STEP events at a time
   - Each window is classified as climbing or descending
   - A descent followed by a climb, starting below MAX_ALTITUDE_FT, is a
     candidate stop-over at the window's first event
   - The stop-over is accepted only when an airport is near that event and
     its elevation is within GROUND_TOLERANCE_FT of the aircraft altitude;
     otherwise the aircraft is assumed to have flown over and scanning continues
   - On acceptance the open flight gets its arrival at the window's first
     event and a new flight departs at the window's last event

3. End check:
   - If the last sample descends, the aircraft landed at its last report;
     an arrival is recorded there.

Finally the open flight is kept only if it has a departure or an arrival.

State Handling:
The scan is a fold. The open flight, the previous trend and the flights
closed so far travel together in a ScanState that each window step
returns anew; nothing is mutated in place, which also makes aircraft
independent of each other and safe to segment in parallel.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .aircraft import working_sequence
from .airports import AirportIndex
from .constants import (
    GROUND_TOLERANCE_FT,
    MAX_ALTITUDE_FT,
    SAMPLE_SIZE,
    WINDOW_STEP,
)
from .decorators import timed, validate_not_none
from .exceptions import ConfigurationError
from .logger import logger
from .models import Aircraft, Event, Flight
from .trend import Trend, classify_trend

__all__ = [
    "ScanState",
    "window_offsets",
    "check_departure",
    "scan_window",
    "check_arrival",
    "segment_events",
    "segment_aircraft",
    "find_flights",
]


class ScanState(NamedTuple):
    """Accumulator threaded through the middle scan."""

    flight: Flight
    previous_trend: Trend
    closed: Tuple[Flight, ...]


def _nearest_airport_id(airport_index: AirportIndex, event: Event) -> Optional[str]:
    airport = airport_index.nearest(event.location)
    return airport.identifier if airport else None


def window_offsets(event_count: int) -> range:
    """
    Start offsets of every full window over a working sequence.

    Sequences shorter than SAMPLE_SIZE have no full window, so the range is
    empty and the middle scan is skipped.

    Example:
        >>> list(window_offsets(50))
        [0, 10, 20]
    """
    return range(0, event_count - SAMPLE_SIZE + 1, WINDOW_STEP)


def check_departure(flight: Flight, events: Sequence[Event], airport_index: AirportIndex) -> Flight:
    """Record a departure at the first event if the opening sample climbs."""
    sample = events[:SAMPLE_SIZE]
    if sample and sample[0].altitude < sample[-1].altitude:
        first = events[0]
        return flight.with_departure(first.timestamp, _nearest_airport_id(airport_index, first))
    return flight


def check_arrival(flight: Flight, events: Sequence[Event], airport_index: AirportIndex) -> Flight:
    """Record an arrival at the last event if the closing sample descends."""
    sample = events[-SAMPLE_SIZE:]
    if sample and sample[0].altitude > sample[-1].altitude:
        last = events[-1]
        return flight.with_arrival(last.timestamp, _nearest_airport_id(airport_index, last))
    return flight


def scan_window(state: ScanState, window: Sequence[Event], airport_index: AirportIndex) -> ScanState:
    """
    Advance the middle scan by one window.

    Args:
        state: Open flight, previous trend and flights closed so far
        window: SAMPLE_SIZE consecutive events of the working sequence
        airport_index: Index used to find the stop-over airport

    Returns:
        The next ScanState. A rejected stop-over returns ``state`` unchanged,
        keeping the previous DECREASE trend so a later window can still match.
    """
    current_trend = classify_trend([event.altitude for event in window])
    flight, previous_trend, closed = state
    touchdown = window[0]

    if (
        previous_trend is Trend.DECREASE
        and current_trend is Trend.INCREASE
        and touchdown.altitude < MAX_ALTITUDE_FT
    ):
        airport = airport_index.nearest(touchdown.location)

        # An unexpected descent and climb away from any airport
        if airport is None:
            logger.debug(
                f"{flight.aircraft_identifier}: no airport near {touchdown.location} "
                f"at {touchdown.timestamp}, ignoring"
            )
            return state

        if abs(airport.elevation - touchdown.altitude) >= GROUND_TOLERANCE_FT:
            logger.debug(
                f"{flight.aircraft_identifier}: flying over {airport.identifier} "
                f"at {touchdown.altitude:.0f}ft (elevation {airport.elevation}ft)"
            )
            return state

        takeoff = window[-1]
        closed = closed + (flight.with_arrival(touchdown.timestamp, airport.identifier),)
        flight = Flight(flight.aircraft_identifier).with_departure(
            takeoff.timestamp, _nearest_airport_id(airport_index, takeoff)
        )
        logger.debug(f"{flight.aircraft_identifier}: stop-over at {airport.identifier}")

    return ScanState(flight, current_trend, closed)


def segment_events(
    aircraft_identifier: str,
    events: Sequence[Event],
    airport_index: AirportIndex,
) -> List[Flight]:
    """
    Detect the flights in one aircraft's events.

    Args:
        aircraft_identifier: Identifier stamped on every flight
        events: The aircraft's events in any order
        airport_index: Index for departure/arrival airport lookups

    Returns:
        Flights in the order they were closed; every one has at least
        a departure or an arrival
    """
    sequence = working_sequence(events)
    if not sequence:
        return []

    flight = check_departure(Flight(aircraft_identifier), sequence, airport_index)

    state = ScanState(flight, Trend.UNKNOWN, ())
    for offset in window_offsets(len(sequence)):
        state = scan_window(state, sequence[offset:offset + SAMPLE_SIZE], airport_index)

    flight = check_arrival(state.flight, sequence, airport_index)

    flights = list(state.closed)
    if flight.has_endpoint:
        flights.append(flight)

    return flights


def segment_aircraft(aircraft: Aircraft, airport_index: AirportIndex) -> List[Flight]:
    """Detect the flights of a single aircraft."""
    flights = segment_events(aircraft.identifier, aircraft.events, airport_index)
    logger.debug(f"{aircraft.identifier}: {len(flights)} flight(s) from {len(aircraft.events)} events")
    return flights


@timed
@validate_not_none('all_aircraft', 'airport_index')
def find_flights(
    all_aircraft: Dict[str, Aircraft],
    airport_index: AirportIndex,
    max_workers: int = 1,
) -> List[Flight]:
    """
    Detect the flights of every aircraft.

    Aircraft are independent, so with ``max_workers > 1`` they are segmented
    in a thread pool. Results are merged in the mapping's order either way,
    so the output does not depend on the worker count.

    Args:
        all_aircraft: Mapping of aircraft identifier to Aircraft
        airport_index: Shared read-only airport index
        max_workers: Number of worker threads (1 = sequential)

    Returns:
        All flights, grouped by aircraft

    Raises:
        ConfigurationError: If max_workers is less than 1
    """
    if max_workers < 1:
        raise ConfigurationError(f"Worker count must be at least 1, got {max_workers}", "workers")

    aircraft_list = list(all_aircraft.values())

    if max_workers == 1 or len(aircraft_list) <= 1:
        results = [segment_aircraft(aircraft, airport_index) for aircraft in aircraft_list]
    else:
        flights_by_aircraft: Dict[str, List[Flight]] = {}
        with ThreadPoolExecutor(max_workers=min(len(aircraft_list), max_workers)) as executor:
            future_to_aircraft = {
                executor.submit(segment_aircraft, aircraft, airport_index): aircraft
                for aircraft in aircraft_list
            }
            for future in as_completed(future_to_aircraft):
                flights_by_aircraft[future_to_aircraft[future].identifier] = future.result()

        # Collect in aircraft order for deterministic output
        results = [flights_by_aircraft[aircraft.identifier] for aircraft in aircraft_list]

    flights = [flight for aircraft_flights in results for flight in aircraft_flights]
    logger.info(f"Identified {len(flights)} potential flights")
    return flights
