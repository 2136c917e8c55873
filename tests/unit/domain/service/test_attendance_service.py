"""Unit tests for AttendanceEligibilityService."""

import math

import pytest

from attend.domain import geo
from attend.domain.error import InvalidCoordinatesError
from attend.domain.service import AttendanceEligibilityService
from attend.domain.value import Coordinates, OfficeReference
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

OFFICE = OfficeReference(latitude=31.0417, longitude=31.3778, radius_meters=100)


@pytest.fixture
def service() -> AttendanceEligibilityService:
    return AttendanceEligibilityService(office=OFFICE)


class TestEvaluate:
    """Tests for evaluate."""

    def test_at_the_office(self, service):
        # Act
        verdict = service.evaluate(OFFICE.coordinates)

        # Assert
        assert verdict.admissible is True
        assert verdict.distance == 0
        assert verdict.proximity == "very close"
        assert verdict.radius_meters == 100

    def test_just_outside_radius(self, service):
        """0.001 degrees north of the office is about 111 m away."""
        # Arrange
        reported = Coordinates(latitude=31.0427, longitude=31.3778)

        # Act
        verdict = service.evaluate(reported)

        # Assert
        assert verdict.admissible is False
        assert verdict.distance == pytest.approx(111.19, abs=0.01)
        assert verdict.proximity == "nearby"
        assert verdict.direction_to_office == "S"
        assert verdict.reported_position == reported

    def test_inside_radius(self, service):
        # Arrange
        reported = Coordinates(latitude=31.0417, longitude=31.3786)

        # Act
        verdict = service.evaluate(reported)

        # Assert
        assert verdict.admissible is True
        assert verdict.distance < 100
        assert verdict.direction_to_office == "W"

    def test_exactly_on_radius_is_admissible(self):
        # Arrange
        reported = Coordinates(latitude=31.0425, longitude=31.3778)
        radius = geo.distance(reported, OFFICE.coordinates)
        service = AttendanceEligibilityService(
            office=OFFICE.model_copy(update={"radius_meters": radius})
        )

        # Act
        verdict = service.evaluate(reported)

        # Assert
        assert verdict.admissible is True

    @pytest.mark.parametrize(
        "latitude,longitude",
        [(200, 31.37), (31.04, -190), (math.nan, 31.37), (31.04, math.inf)],
    )
    def test_invalid_coordinates(self, service, latitude, longitude):
        # Act & Assert
        with pytest.raises(InvalidCoordinatesError):
            service.evaluate(Coordinates(latitude=latitude, longitude=longitude))

    @pytest.mark.asyncio
    async def test_container_uses_configured_office(self, unit_env):
        """The container builds the gate around the configured office."""
        # Arrange
        service = await unit_env.get(AttendanceEligibilityService)
        office = await unit_env.get(OfficeReference)

        # Act
        verdict = service.evaluate(office.coordinates)

        # Assert
        assert verdict.admissible is True
        assert verdict.radius_meters == office.radius_meters
