"""Tests for geometry module."""

import dataclasses

import pytest
from flight_finder.geometry import (
    GeoPoint,
    grid_cell,
    haversine_distance,
    EARTH_RADIUS_KM,
)


class TestHaversineDistance:
    """Tests for haversine_distance function."""

    def test_zero_distance(self):
        """Test distance between same point is zero."""
        assert haversine_distance(0, 0, 0, 0) == pytest.approx(0, abs=0.01)

    def test_equator_distance(self):
        """Test distance along equator."""
        # 1 degree longitude at equator ≈ 111.32 km
        dist = haversine_distance(0, 0, 0, 1)
        assert dist == pytest.approx(111.32, abs=1)

    def test_seattle_to_portland(self):
        """Test distance from Seattle to Portland airports."""
        # Known distance ~208 km
        dist = haversine_distance(47.449, -122.309, 45.589, -122.598)
        assert dist == pytest.approx(208, abs=3)

    def test_antipodal_points(self):
        """Test distance between antipodal points (opposite sides of Earth)."""
        dist = haversine_distance(0, 0, 0, 180)
        expected = EARTH_RADIUS_KM * 3.14159
        assert dist == pytest.approx(expected, abs=10)

    def test_symmetry(self):
        """Test distance is the same in both directions."""
        assert haversine_distance(47.0, -122.0, 45.0, -120.0) == pytest.approx(
            haversine_distance(45.0, -120.0, 47.0, -122.0)
        )


class TestGridCell:
    """Tests for grid_cell function."""

    def test_positive_coordinates(self):
        """Test cells in the north-east quadrant."""
        assert grid_cell(47.9, 8.1) == (47, 8)

    def test_negative_coordinates_floor(self):
        """Test negative coordinates round down, not towards zero."""
        assert grid_cell(-0.5, -0.5) == (-1, -1)
        assert grid_cell(47.449, -122.309) == (47, -123)

    def test_whole_degrees(self):
        """Test whole degrees belong to their own cell."""
        assert grid_cell(47.0, -122.0) == (47, -122)


class TestGeoPoint:
    """Tests for GeoPoint class."""

    def test_valid_point(self):
        """Test a point with both coordinates is valid."""
        point = GeoPoint(47.449, -122.309)
        assert point.is_valid
        assert point.cell == (47, -123)

    def test_zero_coordinates_are_valid(self):
        """Test that 0.0 counts as present."""
        assert GeoPoint(0.0, 0.0).is_valid

    def test_missing_coordinates(self):
        """Test points missing a coordinate are invalid."""
        assert not GeoPoint().is_valid
        assert not GeoPoint(47.0, None).is_valid
        assert not GeoPoint(None, -122.0).is_valid
        assert GeoPoint(None, -122.0).cell is None

    def test_distance_to(self):
        """Test distance between two points."""
        dist = GeoPoint(0.0, 0.0).distance_to(GeoPoint(0.0, 1.0))
        assert dist == pytest.approx(111.32, abs=1)

    def test_distance_to_invalid_point(self):
        """Test measuring to an invalid point is an error."""
        with pytest.raises(ValueError):
            GeoPoint(0.0, 0.0).distance_to(GeoPoint(0.0, None))

    def test_immutable(self):
        """Test points cannot be changed after construction."""
        point = GeoPoint(47.0, -122.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.latitude = 48.0

    def test_equality_and_hash(self):
        """Test points compare and hash by value."""
        assert GeoPoint(47.0, -122.0) == GeoPoint(47.0, -122.0)
        assert len({GeoPoint(47.0, -122.0), GeoPoint(47.0, -122.0)}) == 1

    def test_str(self):
        """Test string form."""
        assert str(GeoPoint(47.5, -122.5)) == "(47.5, -122.5)"
        assert str(GeoPoint()) == "(unknown)"
