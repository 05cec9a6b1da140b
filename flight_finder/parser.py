"""Airport and ADS-B event source parsing.

Source Formats:
- Airports: a single JSON array of objects
  ``{"identifier", "latitude", "longitude", "elevation"}``
- Events: one JSON object per line (blank lines are ignored)
  ``{"identifier", "timestamp", "latitude", "longitude", "altitude"}``
  where latitude, longitude and altitude may be missing or null and the
  timestamp is an ISO 8601 string or Unix epoch seconds

Error Handling:
A missing source raises MissingSourceError before anything is read. Any
record that cannot be turned into an Airport or Event, including one with
coordinates off the globe, raises MalformedRecordError naming the file and
line; there is no partial load.

Example:
    >>> from flight_finder.parser import load_airports, load_events
    >>> airports = load_airports('Resources/airports.json')
    >>> events = load_events('Resources/events.txt')
    >>> print(f"Loaded {len(airports)} airports and {len(events)} events")
    Loaded 6543 airports and 120000 events
"""

import json
import math
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import LAT_MAX, LAT_MIN, LON_MAX, LON_MIN
from .decorators import timed
from .exceptions import MalformedRecordError, MissingSourceError
from .geometry import GeoPoint
from .helpers import parse_epoch_timestamp, parse_iso_timestamp
from .logger import logger
from .models import Airport, Event
from .types import AirportRecord, EventRecord

__all__ = [
    'parse_airport_record',
    'parse_event_record',
    'load_airports',
    'load_events',
]


def _require_source(file_path: str) -> Path:
    path = Path(file_path)
    if not path.is_file():
        raise MissingSourceError("Source file not found", str(file_path))
    return path


def _number(value: Any, field: str, file_path: Optional[str], line_number: Optional[int]) -> float:
    # bool is an int subclass but never a valid coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedRecordError(f"Field '{field}' must be a number, got {value!r}", file_path, line_number)
    try:
        number = float(value)
    except OverflowError as e:
        raise MalformedRecordError(f"Field '{field}' is out of range, got {value!r}", file_path, line_number) from e
    # JSON NaN and Infinity decode to floats
    if not math.isfinite(number):
        raise MalformedRecordError(f"Field '{field}' must be finite, got {value!r}", file_path, line_number)
    return number


def _optional_number(record: Dict[str, Any], field: str, file_path: Optional[str], line_number: Optional[int]) -> Optional[float]:
    value = record.get(field)
    if value is None:
        return None
    return _number(value, field, file_path, line_number)


def _check_coordinates(latitude: Optional[float], longitude: Optional[float], file_path: Optional[str], line_number: Optional[int]) -> None:
    if latitude is not None and not (LAT_MIN <= latitude <= LAT_MAX):
        raise MalformedRecordError(f"Latitude {latitude} out of range [{LAT_MIN}, {LAT_MAX}]", file_path, line_number)
    if longitude is not None and not (LON_MIN <= longitude <= LON_MAX):
        raise MalformedRecordError(f"Longitude {longitude} out of range [{LON_MIN}, {LON_MAX}]", file_path, line_number)


def _identifier(record: Dict[str, Any], file_path: Optional[str], line_number: Optional[int]) -> str:
    identifier = record.get('identifier')
    if not isinstance(identifier, str) or not identifier.strip():
        raise MalformedRecordError(f"Missing identifier in {record!r}", file_path, line_number)
    return identifier.strip()


def _timestamp(value: Any, file_path: Optional[str], line_number: Optional[int]) -> datetime:
    if isinstance(value, str):
        dt = parse_iso_timestamp(value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        dt = parse_epoch_timestamp(value)
    else:
        dt = None

    if dt is None:
        raise MalformedRecordError(f"Invalid timestamp {value!r}", file_path, line_number)
    return dt


def parse_airport_record(record: AirportRecord, file_path: str = None, line_number: int = None) -> Airport:
    """
    Convert a raw airport record into an Airport.

    Args:
        record: Decoded JSON object
        file_path: Source file, for error messages
        line_number: Position of the record, for error messages

    Returns:
        Airport with a valid location

    Raises:
        MalformedRecordError: If a field is missing, has the wrong type or
            is not a finite number
    """
    if not isinstance(record, dict):
        raise MalformedRecordError(f"Airport record must be an object, got {record!r}", file_path, line_number)

    identifier = _identifier(record, file_path, line_number)

    for field in ('latitude', 'longitude', 'elevation'):
        if record.get(field) is None:
            raise MalformedRecordError(f"Airport {identifier} is missing '{field}'", file_path, line_number)

    latitude = _number(record['latitude'], 'latitude', file_path, line_number)
    longitude = _number(record['longitude'], 'longitude', file_path, line_number)
    elevation = _number(record['elevation'], 'elevation', file_path, line_number)
    _check_coordinates(latitude, longitude, file_path, line_number)

    return Airport(identifier, GeoPoint(latitude, longitude), int(elevation))


def parse_event_record(record: EventRecord, file_path: str = None, line_number: int = None) -> Event:
    """
    Convert a raw event record into an Event.

    A location is attached only when both latitude and longitude are present.

    Args:
        record: Decoded JSON object
        file_path: Source file, for error messages
        line_number: Line of the record, for error messages

    Returns:
        Event with optional location and altitude

    Raises:
        MalformedRecordError: If identifier or timestamp are missing or a
            value has the wrong type
    """
    if not isinstance(record, dict):
        raise MalformedRecordError(f"Event record must be an object, got {record!r}", file_path, line_number)

    identifier = _identifier(record, file_path, line_number)

    if record.get('timestamp') is None:
        raise MalformedRecordError(f"Event for {identifier} is missing 'timestamp'", file_path, line_number)
    timestamp = _timestamp(record['timestamp'], file_path, line_number)

    latitude = _optional_number(record, 'latitude', file_path, line_number)
    longitude = _optional_number(record, 'longitude', file_path, line_number)
    altitude = _optional_number(record, 'altitude', file_path, line_number)
    _check_coordinates(latitude, longitude, file_path, line_number)

    location = None
    if latitude is not None and longitude is not None:
        location = GeoPoint(latitude, longitude)

    return Event(identifier, timestamp, location, altitude)


@timed
def load_airports(file_path: str) -> List[Airport]:
    """
    Load airports from a JSON array file.

    Args:
        file_path: Path to the airport source

    Returns:
        List of airports in file order

    Raises:
        MissingSourceError: If the file does not exist
        MalformedRecordError: If the file or any record is invalid
    """
    path = _require_source(file_path)

    data = path.read_bytes()
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        line_number = data.count(b'\n', 0, e.start) + 1
        raise MalformedRecordError(f"Invalid UTF-8: {e.reason}", str(file_path), line_number) from e

    try:
        records = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedRecordError(f"Invalid JSON: {e.msg}", str(file_path), e.lineno) from e

    if not isinstance(records, list):
        raise MalformedRecordError("Airport source must contain a JSON array", str(file_path))

    airports = [
        parse_airport_record(record, str(file_path), idx + 1)
        for idx, record in enumerate(records)
    ]
    logger.debug(f"Read {len(airports)} airports from {file_path}")
    return airports


@timed
def load_events(file_path: str) -> List[Event]:
    """
    Load ADS-B events from a JSON lines file.

    Args:
        file_path: Path to the event source

    Returns:
        List of events in file order

    Raises:
        MissingSourceError: If the file does not exist
        MalformedRecordError: If any line is invalid
    """
    path = _require_source(file_path)
    events = []

    # Decoded per line so an encoding error can name its line
    with open(path, 'rb') as f:
        for line_number, raw_line in enumerate(f, start=1):
            try:
                line = raw_line.decode('utf-8').strip()
            except UnicodeDecodeError as e:
                raise MalformedRecordError(f"Invalid UTF-8: {e.reason}", str(file_path), line_number) from e
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise MalformedRecordError(f"Invalid JSON: {e.msg}", str(file_path), line_number) from e
            events.append(parse_event_record(record, str(file_path), line_number))

    logger.debug(f"Read {len(events)} events from {file_path}")
    return events
