"""Export of detected flights.

Flights are written as JSON lines, one object per flight, in the order the
segmenter produced them. Timestamps are ISO 8601 UTC strings and unknown
endpoints are written as null so every line has the same keys.
"""

import os
import json
from typing import Iterable, Tuple

from .helpers import format_iso_timestamp
from .logger import logger
from .models import Flight
from .types import FlightRecord

__all__ = ["flight_to_record", "export_flights"]


def flight_to_record(flight: Flight) -> FlightRecord:
    """
    Convert a Flight into its serializable record.

    Args:
        flight: Flight to convert

    Returns:
        FlightRecord with ISO timestamps
    """
    return {
        "aircraft_identifier": flight.aircraft_identifier,
        "departure_time": format_iso_timestamp(flight.departure_time),
        "departure_airport": flight.departure_airport,
        "arrival_time": format_iso_timestamp(flight.arrival_time),
        "arrival_airport": flight.arrival_airport,
    }


def export_flights(flights: Iterable[Flight], output_path: str) -> Tuple[str, int]:
    """
    Write flights to a JSON lines file, replacing any existing file.

    Args:
        flights: Flights to write
        output_path: Destination file; missing parent directories are created

    Returns:
        Tuple of (output_file_path, flight_count)
    """
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    count = 0
    with open(output_path, "w", encoding="utf-8") as f:
        for flight in flights:
            f.write(json.dumps(flight_to_record(flight), separators=(",", ":")))
            f.write("\n")
            count += 1

    file_size = os.path.getsize(output_path)
    logger.info(f"  ✓ Flights: {count} written to {output_path} ({file_size / 1024:.1f} KB)")

    return output_path, count
