"""Tests for logger module."""

import logging
import sys

from flight_finder.airports import AirportIndex
from flight_finder.logger import setup_logger, logger, set_debug_mode
from flight_finder.segmenter import find_flights


class TestSetupLogger:
    """Tests for setup_logger function."""

    def test_writes_to_stdout(self):
        """Test the single handler writes level and message to stdout."""
        test_logger = setup_logger("test_flight_finder_stdout")
        assert len(test_logger.handlers) == 1
        handler = test_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout
        assert handler.formatter._fmt == "%(levelname)s: %(message)s"

    def test_debug_overrides_level(self):
        """Test that debug=True wins over an explicit level."""
        test_logger = setup_logger("test_flight_finder_debug", level=logging.WARNING, debug=True)
        assert test_logger.level == logging.DEBUG
        assert test_logger.handlers[0].level == logging.DEBUG

    def test_repeated_setup_keeps_one_handler(self):
        """Test that configuring a logger twice does not duplicate output."""
        setup_logger("test_flight_finder_repeat")
        again = setup_logger("test_flight_finder_repeat")
        assert len(again.handlers) == 1


class TestPackageLogger:
    """Tests for the flight_finder package logger."""

    def test_name_and_default_level(self):
        """Test the package logger is configured on import at INFO."""
        assert logger.name == "flight_finder"
        assert logger.level == logging.INFO
        assert logger is logging.getLogger("flight_finder")

    def test_modules_log_through_package_logger(self, caplog, airport_index):
        """Test segmentation progress is reported under the package name."""
        find_flights({}, airport_index)
        records = [r for r in caplog.records if "potential flights" in r.getMessage()]
        assert len(records) == 1
        assert records[0].name == "flight_finder"
        assert records[0].levelno == logging.INFO

    def test_index_details_hidden_by_default(self, caplog):
        """Test debug details are not emitted at the default level."""
        AirportIndex([])
        assert "Indexed 0 airports" not in caplog.text


class TestSetDebugMode:
    """Tests for set_debug_mode function."""

    def test_enable_shows_debug_details(self, caplog):
        """Test enabling debug mode lets module debug messages through."""
        set_debug_mode(True)
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)

        AirportIndex([])
        assert "Indexed 0 airports in 0 grid cells" in caplog.text

    def test_disable_restores_info(self):
        """Test turning debug mode off returns logger and handlers to INFO."""
        set_debug_mode(True)
        set_debug_mode(False)
        assert logger.level == logging.INFO
        assert all(h.level == logging.INFO for h in logger.handlers)
