"""Pytest configuration and shared fixtures for flight-finder tests."""

import pytest

from flight_finder.airports import AirportIndex
from flight_finder.geometry import GeoPoint
from flight_finder.logger import set_debug_mode
from flight_finder.models import Airport

from flight_builders import SEATTLE


@pytest.fixture(autouse=True)
def reset_debug_mode():
    """Leave the package logger at INFO after every test.

    The CLI enables debug mode globally, which would otherwise leak
    into later tests.
    """
    yield
    set_debug_mode(False)


@pytest.fixture
def seattle_airport():
    """Seattle-Tacoma, elevation 433 ft."""
    return Airport("KSEA", SEATTLE, 433)


@pytest.fixture
def airport_index(seattle_airport):
    """Index holding Seattle, Portland and Denver."""
    return AirportIndex(
        [
            seattle_airport,
            Airport("KPDX", GeoPoint(45.5887, -122.5975), 31),
            Airport("KDEN", GeoPoint(39.8617, -104.6731), 5434),
        ]
    )


@pytest.fixture
def empty_index():
    """Index without any airports."""
    return AirportIndex([])
