"""Geospatial helpers for geofenced attendance.

Distances use the haversine formula on a spherical Earth, which is accurate
well below a metre at office-radius scales.
"""

import math
from numbers import Real

from attend.domain.error import InvalidCoordinatesError
from attend.domain.value import Coordinates

EARTH_RADIUS_METERS = 6_371_000.0

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

# (upper bound in meters, description), checked in order
DISTANCE_BUCKETS = (
    (10, "very close"),
    (50, "close"),
    (100, "near"),
    (500, "nearby"),
    (1000, "far"),
)


def validate_coordinates(latitude: object, longitude: object) -> bool:
    """Check that a latitude/longitude pair is usable.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Returns:
        True if both are finite numbers within [-90, 90] and [-180, 180]
    """
    for value in (latitude, longitude):
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        if not math.isfinite(value):
            return False
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def ensure_valid(point: Coordinates) -> None:
    """Raise InvalidCoordinatesError unless the point passes validation."""
    if not validate_coordinates(point.latitude, point.longitude):
        raise InvalidCoordinatesError(point.latitude, point.longitude)


def distance(p1: Coordinates, p2: Coordinates) -> float:
    """Great-circle distance between two points in meters.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Distance in meters

    Raises:
        InvalidCoordinatesError: If either point is invalid
    """
    ensure_valid(p1)
    ensure_valid(p2)

    phi1 = math.radians(p1.latitude)
    phi2 = math.radians(p2.latitude)
    dphi = math.radians(p2.latitude - p1.latitude)
    dlambda = math.radians(p2.longitude - p1.longitude)

    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # Rounding can push a just outside [0, 1] near antipodes
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def bearing(p1: Coordinates, p2: Coordinates) -> float:
    """Initial compass bearing from p1 to p2 in degrees, in [0, 360).

    Raises:
        InvalidCoordinatesError: If either point is invalid
    """
    ensure_valid(p1)
    ensure_valid(p2)

    phi1 = math.radians(p1.latitude)
    phi2 = math.radians(p2.latitude)
    dlambda = math.radians(p2.longitude - p1.longitude)

    y = math.sin(dlambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(
        dlambda
    )
    theta = math.degrees(math.atan2(y, x))
    return (theta + 360) % 360


def describe_distance(meters: float) -> str:
    """Coarse human description of a distance."""
    for upper, description in DISTANCE_BUCKETS:
        if meters < upper:
            return description
    return "very far"


def describe_direction(degrees: float) -> str:
    """Nearest of the eight compass points for a bearing.

    Sector boundaries round half up, so 22.5 is NE.
    """
    index = math.floor((degrees % 360) / 45 + 0.5) % 8
    return COMPASS_POINTS[index]


def format_coordinates(point: Coordinates) -> str:
    """Display form with hemisphere letters, e.g. '31.041700°N, 31.377800°E'."""
    lat_hemisphere = "N" if point.latitude >= 0 else "S"
    lon_hemisphere = "E" if point.longitude >= 0 else "W"
    return (
        f"{abs(point.latitude):.6f}°{lat_hemisphere}, "
        f"{abs(point.longitude):.6f}°{lon_hemisphere}"
    )
