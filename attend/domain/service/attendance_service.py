"""Attendance eligibility domain service."""

import logfire

from attend.domain import geo
from attend.domain.error import InvalidCoordinatesError
from attend.domain.value import Coordinates, OfficeReference
from attend.domain.value.common import ValueObject

from .base import Service


class EligibilityVerdict(ValueObject):
    """Whether a reported position may be used for check-in or check-out."""

    admissible: bool
    distance: float  # meters
    reported_position: Coordinates
    radius_meters: float
    proximity: str
    direction_to_office: str


class AttendanceEligibilityService(Service):
    """Decide whether a reported position lies inside the office geofence.

    Pure: nothing is read from or written to any store.
    """

    span_prefix = "attendance_eligibility"

    def __init__(self, office: OfficeReference) -> None:
        """Initialize eligibility service.

        Args:
            office: Geofence centre and radius
        """
        self.office = office

    def evaluate(self, reported_position: Coordinates) -> EligibilityVerdict:
        """Evaluate a reported position against the office geofence.

        A position exactly on the radius is admissible.

        Args:
            reported_position: Position reported by the employee

        Returns:
            Verdict with the distance to the office and hints for the user

        Raises:
            InvalidCoordinatesError: If the reported position is not usable
        """
        with self._span(
            "evaluate",
            latitude=reported_position.latitude,
            longitude=reported_position.longitude,
        ):
            if not geo.validate_coordinates(
                reported_position.latitude, reported_position.longitude
            ):
                logfire.warn(
                    "Rejected invalid coordinates",
                    latitude=reported_position.latitude,
                    longitude=reported_position.longitude,
                )
                raise InvalidCoordinatesError(
                    reported_position.latitude, reported_position.longitude
                )

            office = self.office.coordinates
            meters = geo.distance(reported_position, office)
            admissible = meters <= self.office.radius_meters

            logfire.info(
                "Position evaluated",
                distance=round(meters, 2),
                radius=self.office.radius_meters,
                admissible=admissible,
            )
            return EligibilityVerdict(
                admissible=admissible,
                distance=meters,
                reported_position=reported_position,
                radius_meters=self.office.radius_meters,
                proximity=geo.describe_distance(meters),
                direction_to_office=geo.describe_direction(
                    geo.bearing(reported_position, office)
                ),
            )
