"""Unit tests for the geospatial helpers."""

import math

import pytest

from attend.domain import geo
from attend.domain.error import InvalidCoordinatesError
from attend.domain.value import Coordinates

OFFICE = Coordinates(latitude=31.0417, longitude=31.3778)


class TestValidateCoordinates:
    """Tests for validate_coordinates."""

    @pytest.mark.parametrize(
        "latitude,longitude",
        [(0, 0), (90, 180), (-90, -180), (31.0417, 31.3778)],
    )
    def test_accepts_in_range_values(self, latitude, longitude):
        """Values inside the ranges, boundaries included, are valid."""
        assert geo.validate_coordinates(latitude, longitude) is True

    @pytest.mark.parametrize(
        "latitude,longitude",
        [
            (200, 31.37),
            (-90.0001, 0),
            (0, 180.5),
            (math.nan, 0),
            (0, math.inf),
            (True, 0),
            ("31.0", "31.3"),
            (None, 0),
        ],
    )
    def test_rejects_unusable_values(self, latitude, longitude):
        """Out of range, non-finite and non-numeric values are invalid."""
        assert geo.validate_coordinates(latitude, longitude) is False


class TestDistance:
    """Tests for the haversine distance."""

    def test_same_point_is_zero(self):
        """Distance from a point to itself is zero."""
        assert geo.distance(OFFICE, OFFICE) == 0

    def test_is_symmetric(self):
        """Distance does not depend on argument order."""
        other = Coordinates(latitude=30.0444, longitude=31.2357)  # Cairo

        assert geo.distance(OFFICE, other) == pytest.approx(geo.distance(other, OFFICE))

    def test_thousandth_of_a_degree_latitude(self):
        """0.001 degrees of latitude is about 111 meters."""
        north = Coordinates(latitude=OFFICE.latitude + 0.001, longitude=OFFICE.longitude)

        assert geo.distance(north, OFFICE) == pytest.approx(111.19, abs=0.01)

    def test_grows_with_separation(self):
        """Moving further along a parallel increases the distance."""
        steps = [
            Coordinates(latitude=OFFICE.latitude, longitude=OFFICE.longitude + delta)
            for delta in (0.001, 0.01, 0.1, 1.0)
        ]

        distances = [geo.distance(OFFICE, step) for step in steps]

        assert distances == sorted(distances)
        assert len(set(distances)) == len(distances)

    def test_antipodes_are_half_the_circumference(self):
        """Clamping keeps antipodal points finite."""
        result = geo.distance(
            Coordinates(latitude=0, longitude=0),
            Coordinates(latitude=0, longitude=180),
        )

        assert result == pytest.approx(math.pi * geo.EARTH_RADIUS_METERS)

    def test_invalid_point_raises(self):
        """Invalid coordinates are rejected before any computation."""
        with pytest.raises(InvalidCoordinatesError):
            geo.distance(Coordinates(latitude=200, longitude=31.37), OFFICE)


class TestBearing:
    """Tests for the initial bearing."""

    def test_due_north(self):
        assert geo.bearing(
            Coordinates(latitude=0, longitude=0), Coordinates(latitude=1, longitude=0)
        ) == pytest.approx(0)

    def test_due_east(self):
        assert geo.bearing(
            Coordinates(latitude=0, longitude=0), Coordinates(latitude=0, longitude=1)
        ) == pytest.approx(90)

    def test_due_south(self):
        assert geo.bearing(
            Coordinates(latitude=1, longitude=0), Coordinates(latitude=0, longitude=0)
        ) == pytest.approx(180)

    def test_due_west_is_normalised(self):
        """Negative angles are reported in [0, 360)."""
        assert geo.bearing(
            Coordinates(latitude=0, longitude=1), Coordinates(latitude=0, longitude=0)
        ) == pytest.approx(270)


class TestDescriptions:
    """Tests for the human-readable descriptions."""

    @pytest.mark.parametrize(
        "meters,expected",
        [
            (0, "very close"),
            (9.99, "very close"),
            (10, "close"),
            (49.9, "close"),
            (50, "near"),
            (99.9, "near"),
            (100, "nearby"),
            (499, "nearby"),
            (500, "far"),
            (999, "far"),
            (1000, "very far"),
            (25_000, "very far"),
        ],
    )
    def test_describe_distance(self, meters, expected):
        assert geo.describe_distance(meters) == expected

    @pytest.mark.parametrize(
        "degrees,expected",
        [
            (0, "N"),
            (22.4, "N"),
            (22.5, "NE"),
            (90, "E"),
            (135, "SE"),
            (180, "S"),
            (225, "SW"),
            (270, "W"),
            (315, "NW"),
            (337.5, "N"),
            (359.9, "N"),
            (360, "N"),
            (-90, "W"),
        ],
    )
    def test_describe_direction(self, degrees, expected):
        """Sector boundaries round half up to the next compass point."""
        assert geo.describe_direction(degrees) == expected

    def test_format_coordinates_northern_eastern(self):
        assert geo.format_coordinates(OFFICE) == "31.041700°N, 31.377800°E"

    def test_format_coordinates_southern_western(self):
        point = Coordinates(latitude=-33.8688, longitude=-151.2093)

        assert geo.format_coordinates(point) == "33.868800°S, 151.209300°W"
