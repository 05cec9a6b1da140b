"""Command-line interface."""

import os
import sys

from .airports import AirportIndex
from .aircraft import group_events_by_aircraft
from .config_validator import validate_environment
from .constants import (
    AIRPORTS_PATH_ENV,
    DEFAULT_AIRPORTS_PATH,
    DEFAULT_EVENTS_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_WORKERS,
    EVENTS_PATH_ENV,
    MAX_WORKERS,
    OUTPUT_PATH_ENV,
)
from .exceptions import FlightFinderError
from .exporter import export_flights
from .logger import logger, set_debug_mode
from .parser import load_airports, load_events
from .segmenter import find_flights
from .statistics import calculate_statistics
from .types import RunStatistics

# Value-taking options and the keys they set
VALUE_OPTIONS = {
    '--airports': 'airports_path',
    '--events': 'events_path',
    '--output': 'output_path',
    '--workers': 'workers',
}


def print_help():
    """Print comprehensive help message."""
    help_text = f"""
Flight Finder
=============

Reconstruct probable flights (departures and arrivals) from ADS-B position
reports and a list of known airports.

USAGE:
    flight-finder [OPTIONS]

OPTIONS:
    --airports PATH      Airport source, a JSON array
                         (default: ${AIRPORTS_PATH_ENV} or {DEFAULT_AIRPORTS_PATH})
    --events PATH        Event source, one JSON object per line
                         (default: ${EVENTS_PATH_ENV} or {DEFAULT_EVENTS_PATH})
    --output PATH        Result file, one JSON flight per line
                         (default: ${OUTPUT_PATH_ENV} or {DEFAULT_OUTPUT_PATH})
    --workers N          Segment aircraft in N parallel threads (1-{MAX_WORKERS}, default: {DEFAULT_WORKERS})
    --debug              Enable debug output to diagnose segmentation
    --help, -h           Show this help message

DETECTION:
    • Departure     - Altitude climbs at the start of an aircraft's reports
    • Arrival       - Altitude descends at the end of an aircraft's reports
    • Stop-over     - Descent followed by a climb near an airport, close to
                      the airport's elevation, splits the track into two flights

EXAMPLES:
    # Use the default Resources/ files
    flight-finder

    # Explicit files and four worker threads
    flight-finder --airports airports.json --events events.txt --output flights.json --workers 4

    # Debug mode for troubleshooting
    flight-finder --debug

OUTPUT:
    Each line of the result file holds aircraft_identifier, departure_time,
    departure_airport, arrival_time and arrival_airport (null when unknown).
"""
    print(help_text)


def run(airports_path: str, events_path: str, output_path: str, workers: int = DEFAULT_WORKERS) -> RunStatistics:
    """
    Load sources, detect flights and write the results.

    Args:
        airports_path: Airport source path
        events_path: Event source path
        output_path: Result file path
        workers: Number of segmentation threads

    Returns:
        Statistics of the run

    Raises:
        FlightFinderError: On missing sources, malformed records or bad options
    """
    validate_environment(airports_path, events_path, output_path, workers)
    workers = min(workers, MAX_WORKERS)

    airports = load_airports(airports_path)
    events = load_events(events_path)
    logger.info(f"Loaded {len(airports)} airports and {len(events)} events")

    airport_index = AirportIndex(airports)
    all_aircraft = group_events_by_aircraft(events)
    flights = find_flights(all_aircraft, airport_index, workers)

    export_flights(flights, output_path)

    stats = calculate_statistics(flights, all_aircraft)
    logger.info(
        f"  Complete: {stats['complete_flights']}, "
        f"departure only: {stats['departure_only_flights']}, "
        f"arrival only: {stats['arrival_only_flights']}"
    )
    if 'average_flight_time_str' in stats:
        logger.info(f"  Average flight time: {stats['average_flight_time_str']}")
    for airport in stats['busiest_airports']:
        logger.debug(f"  {airport['identifier']}: {airport['departures']} departures, {airport['arrivals']} arrivals")

    return stats


def main():
    """Main CLI entry point."""
    if '--help' in sys.argv or '-h' in sys.argv:
        print_help()
        sys.exit(0)

    options = {
        'airports_path': os.environ.get(AIRPORTS_PATH_ENV, DEFAULT_AIRPORTS_PATH),
        'events_path': os.environ.get(EVENTS_PATH_ENV, DEFAULT_EVENTS_PATH),
        'output_path': os.environ.get(OUTPUT_PATH_ENV, DEFAULT_OUTPUT_PATH),
        'workers': str(DEFAULT_WORKERS),
    }

    i = 1
    while i < len(sys.argv):
        arg = sys.argv[i]

        if arg == '--debug':
            set_debug_mode(True)
            i += 1
        elif arg in VALUE_OPTIONS:
            if i + 1 < len(sys.argv):
                options[VALUE_OPTIONS[arg]] = sys.argv[i + 1]
                i += 2
            else:
                print(f"Error: {arg} requires a value")
                sys.exit(1)
        elif arg.startswith('--'):
            logger.error(f"Unknown option: {arg}")
            sys.exit(1)
        else:
            logger.error(f"Unexpected argument: {arg}")
            sys.exit(1)

    try:
        workers = int(options['workers'])
    except ValueError:
        print(f"Error: --workers requires a number, got {options['workers']!r}")
        sys.exit(1)

    print(f"\nFlight Finder")
    print(f"{'=' * 50}\n")

    try:
        run(options['airports_path'], options['events_path'], options['output_path'], workers)
    except FlightFinderError as e:
        logger.error(str(e))
        sys.exit(1)
