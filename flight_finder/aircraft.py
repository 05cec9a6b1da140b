"""Grouping of ADS-B events by aircraft."""

from typing import Dict, Iterable, List

from .logger import logger
from .models import Aircraft, Event

__all__ = [
    "group_events_by_aircraft",
    "working_sequence",
]


def group_events_by_aircraft(events: Iterable[Event]) -> Dict[str, Aircraft]:
    """
    Group events by aircraft identifier.

    Every event is kept, including those without coordinates or altitude.
    Aircraft appear in the order their first event was seen, and each
    aircraft's events keep their input order.

    Args:
        events: All events of the run, in any order

    Returns:
        Dict mapping aircraft identifier to its Aircraft record
    """
    all_aircraft: Dict[str, Aircraft] = {}

    for event in events:
        aircraft = all_aircraft.get(event.aircraft_identifier)
        if aircraft is None:
            aircraft = Aircraft(event.aircraft_identifier)
            all_aircraft[event.aircraft_identifier] = aircraft
        aircraft.events.append(event)

    logger.info(f"Identified {len(all_aircraft)} aircraft")
    return all_aircraft


def working_sequence(events: Iterable[Event]) -> List[Event]:
    """
    Chronological events usable for altitude trend analysis.

    Events without coordinates are dropped, the rest are sorted by timestamp
    (stable, so simultaneous reports keep their input order), and finally
    events without altitude are dropped.

    Args:
        events: One aircraft's events

    Returns:
        Events that all carry a location and an altitude, oldest first
    """
    located = sorted((event for event in events if event.has_location), key=lambda event: event.timestamp)
    return [event for event in located if event.has_altitude]
