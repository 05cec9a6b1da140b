"""Tests for exceptions module."""

import pytest
from flight_finder.exceptions import (
    FlightFinderError,
    MissingSourceError,
    MalformedRecordError,
    ConfigurationError,
)


class TestFlightFinderError:
    """Tests for base exception."""

    def test_is_exception(self):
        """Test the base class is a plain Exception."""
        assert issubclass(FlightFinderError, Exception)

    @pytest.mark.parametrize("cls", [MissingSourceError, MalformedRecordError, ConfigurationError])
    def test_subclasses(self, cls):
        """Test every error can be caught as FlightFinderError."""
        with pytest.raises(FlightFinderError):
            raise cls("boom")


class TestMissingSourceError:
    """Tests for MissingSourceError."""

    def test_with_file_path(self):
        """Test message includes the file."""
        error = MissingSourceError("Source file not found", "/data/events.txt")
        assert str(error) == "Source file not found (File: /data/events.txt)"
        assert error.file_path == "/data/events.txt"

    def test_without_file_path(self):
        """Test message alone."""
        error = MissingSourceError("Source file not found")
        assert str(error) == "Source file not found"
        assert error.file_path is None


class TestMalformedRecordError:
    """Tests for MalformedRecordError."""

    def test_with_file_and_line(self):
        """Test full location information."""
        error = MalformedRecordError("Invalid JSON", "events.txt", 42)
        assert str(error) == "Invalid JSON | File: events.txt | Line: 42"
        assert error.file_path == "events.txt"
        assert error.line_number == 42

    def test_with_file_only(self):
        """Test message without line."""
        assert str(MalformedRecordError("Bad root", "airports.json")) == "Bad root | File: airports.json"

    def test_message_only(self):
        """Test bare message."""
        error = MalformedRecordError("Bad record")
        assert str(error) == "Bad record"
        assert error.line_number is None


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_with_key(self):
        """Test message includes the key."""
        error = ConfigurationError("Must be at least 1", "max_workers")
        assert str(error) == "Must be at least 1 (Key: max_workers)"
        assert error.config_key == "max_workers"

    def test_without_key(self):
        """Test message alone."""
        assert str(ConfigurationError("Invalid")) == "Invalid"
