"""Attendance routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from attend.application.usecase.attendance import (
    EvaluatePositionRequest,
    EvaluatePositionResponse,
    EvaluatePositionUseCase,
)
from attend.interface.api.errors import to_http

router = APIRouter(prefix="/attendance", tags=["attendance"], route_class=DishkaRoute)


@router.post("/eligibility", response_model=EvaluatePositionResponse)
async def evaluate_eligibility(
    request: EvaluatePositionRequest,
    evaluate_position_use_case: FromDishka[EvaluatePositionUseCase],
) -> JSONResponse:
    """Check whether a reported position is close enough to the office.

    Args:
        request: Reported latitude and longitude
        evaluate_position_use_case: Evaluate position use case from DI

    Returns:
        Eligibility verdict; 400 for unusable coordinates
    """
    response = await evaluate_position_use_case.execute(request)
    return to_http(response)
