"""Evaluate reported position use case."""

from pydantic import BaseModel

from attend.application.usecase.base import BaseUseCase, UseCaseResponse
from attend.domain import geo
from attend.domain.service import AttendanceEligibilityService
from attend.domain.value import Coordinates


class EvaluatePositionRequest(BaseModel):
    """Position reported by an employee during check-in or check-out."""

    latitude: float
    longitude: float


class EvaluatePositionResponse(UseCaseResponse):
    """Eligibility verdict for a reported position."""

    admissible: bool | None = None
    distance: float | None = None  # meters
    radius_meters: float | None = None
    proximity: str | None = None
    direction_to_office: str | None = None
    reported_position: Coordinates | None = None
    reported_position_display: str | None = None  # e.g. "31.041700°N, 31.377800°E"


class EvaluatePositionUseCase(
    BaseUseCase[EvaluatePositionRequest, EvaluatePositionResponse]
):
    """Use case for checking a position against the office geofence."""

    response_class = EvaluatePositionResponse

    def __init__(self, eligibility_service: AttendanceEligibilityService) -> None:
        """Initialize use case.

        Args:
            eligibility_service: Attendance eligibility domain service
        """
        self.eligibility_service = eligibility_service

    async def _execute(
        self, request: EvaluatePositionRequest
    ) -> EvaluatePositionResponse:
        position = Coordinates(latitude=request.latitude, longitude=request.longitude)
        verdict = self.eligibility_service.evaluate(position)

        return EvaluatePositionResponse(
            message="Within office radius"
            if verdict.admissible
            else "Outside office radius",
            admissible=verdict.admissible,
            distance=round(verdict.distance, 2),
            radius_meters=verdict.radius_meters,
            proximity=verdict.proximity,
            direction_to_office=verdict.direction_to_office,
            reported_position=verdict.reported_position,
            reported_position_display=geo.format_coordinates(verdict.reported_position),
        )
