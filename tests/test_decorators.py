"""Tests for decorators module."""

from unittest.mock import patch

import pytest
from flight_finder.decorators import timed, validate_not_none


class TestTimedDecorator:
    """Tests for timed decorator."""

    def test_timed_basic(self):
        """Test basic timed decorator functionality."""

        @timed
        def simple_function():
            return "result"

        assert simple_function() == "result"

    def test_timed_with_args_and_kwargs(self):
        """Test timed decorator passes arguments through."""

        @timed
        def greet(name, greeting="Hello"):
            return f"{greeting}, {name}"

        assert greet("World", greeting="Hi") == "Hi, World"

    def test_timed_preserves_metadata(self):
        """Test function name and docstring survive wrapping."""

        @timed
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."

    def test_timed_logs_duration(self, caplog):
        """Test elapsed time is logged at debug level."""

        @timed
        def quick():
            return 1

        with caplog.at_level("DEBUG", logger="flight_finder"):
            quick()
        assert "quick took" in caplog.text

    def test_timed_warns_when_slow(self, caplog):
        """Test slow calls produce a warning."""

        @timed
        def slow():
            return 1

        with patch("flight_finder.decorators.SLOW_CALL_SECONDS", -1.0):
            with caplog.at_level("WARNING", logger="flight_finder"):
                slow()
        assert "consider --workers" in caplog.text

    def test_timed_propagates_exceptions(self):
        """Test exceptions pass through unchanged."""

        @timed
        def failing():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            failing()


class TestValidateNotNoneDecorator:
    """Tests for validate_not_none decorator."""

    def test_valid_arguments(self):
        """Test call proceeds when parameters are set."""

        @validate_not_none("a", "b")
        def add(a, b):
            return a + b

        assert add(1, 2) == 3

    def test_none_positional(self):
        """Test None passed positionally is rejected."""

        @validate_not_none("index")
        def lookup(items, index):
            return items

        with pytest.raises(ValueError, match="Parameter 'index' cannot be None in lookup\\(\\)"):
            lookup([], None)

    def test_none_keyword(self):
        """Test None passed by keyword is rejected."""

        @validate_not_none("index")
        def lookup(items, index=None):
            return items

        with pytest.raises(ValueError, match="index"):
            lookup([], index=None)

    def test_none_default(self):
        """Test a None default is also rejected."""

        @validate_not_none("index")
        def lookup(items, index=None):
            return items

        with pytest.raises(ValueError):
            lookup([])

    def test_unchecked_parameter_may_be_none(self):
        """Test other parameters are not checked."""

        @validate_not_none("index")
        def lookup(items, index):
            return index

        assert lookup(None, 3) == 3
