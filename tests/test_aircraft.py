"""Tests for aircraft module."""

from datetime import timedelta

from flight_finder.aircraft import group_events_by_aircraft, working_sequence
from flight_finder.geometry import GeoPoint
from flight_finder.models import Event

from flight_builders import SEATTLE, START_TIME


def event(identifier, minute, location=SEATTLE, altitude=1000.0):
    return Event(identifier, START_TIME + timedelta(minutes=minute), location, altitude)


class TestGroupEventsByAircraft:
    """Tests for group_events_by_aircraft function."""

    def test_groups_by_identifier(self):
        """Test events are grouped under their aircraft."""
        events = [event("AAA", 0), event("BBB", 0), event("AAA", 1)]
        all_aircraft = group_events_by_aircraft(events)
        assert set(all_aircraft) == {"AAA", "BBB"}
        assert len(all_aircraft["AAA"].events) == 2
        assert all_aircraft["AAA"].identifier == "AAA"

    def test_preserves_event_order(self):
        """Test each aircraft's events keep their input order."""
        events = [event("AAA", 5), event("AAA", 1), event("AAA", 3)]
        all_aircraft = group_events_by_aircraft(events)
        assert all_aircraft["AAA"].events == events

    def test_aircraft_in_first_seen_order(self):
        """Test aircraft appear in the order their first event was seen."""
        events = [event("CCC", 0), event("AAA", 0), event("BBB", 0), event("AAA", 1)]
        assert list(group_events_by_aircraft(events)) == ["CCC", "AAA", "BBB"]

    def test_keeps_incomplete_events(self):
        """Test events without location or altitude are not filtered."""
        events = [event("AAA", 0, location=None), event("AAA", 1, altitude=None)]
        assert len(group_events_by_aircraft(events)["AAA"].events) == 2

    def test_no_events_dropped_or_duplicated(self):
        """Test the total number of events is unchanged."""
        events = [event(f"A{i % 7}", i) for i in range(100)]
        all_aircraft = group_events_by_aircraft(events)
        assert sum(len(a.events) for a in all_aircraft.values()) == 100

    def test_empty(self):
        """Test no events give no aircraft."""
        assert group_events_by_aircraft([]) == {}

    def test_accepts_generator(self):
        """Test any iterable of events can be grouped."""
        all_aircraft = group_events_by_aircraft(event("AAA", i) for i in range(3))
        assert len(all_aircraft["AAA"].events) == 3


class TestWorkingSequence:
    """Tests for working_sequence function."""

    def test_sorted_by_timestamp(self):
        """Test events come back oldest first."""
        events = [event("AAA", 5), event("AAA", 1), event("AAA", 3)]
        assert [e.timestamp for e in working_sequence(events)] == [
            START_TIME + timedelta(minutes=m) for m in (1, 3, 5)
        ]

    def test_drops_events_without_location(self):
        """Test events missing a coordinate are removed."""
        events = [
            event("AAA", 0, location=None),
            event("AAA", 1, location=GeoPoint(47.0, None)),
            event("AAA", 2),
        ]
        assert working_sequence(events) == [events[2]]

    def test_drops_events_without_altitude(self):
        """Test events missing altitude are removed."""
        events = [event("AAA", 0, altitude=None), event("AAA", 1)]
        assert working_sequence(events) == [events[1]]

    def test_keeps_zero_altitude(self):
        """Test that an altitude of zero is present, not missing."""
        assert len(working_sequence([event("AAA", 0, altitude=0.0)])) == 1

    def test_equal_timestamps_keep_input_order(self):
        """Test sorting is stable for simultaneous reports."""
        first = event("AAA", 1, altitude=100.0)
        second = event("AAA", 1, altitude=200.0)
        assert working_sequence([second, first]) == [second, first]

    def test_empty(self):
        """Test no events give an empty sequence."""
        assert working_sequence([]) == []
