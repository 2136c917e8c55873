"""Attendance use cases."""

from attend.application.usecase.attendance.evaluate_position import (
    EvaluatePositionRequest,
    EvaluatePositionResponse,
    EvaluatePositionUseCase,
)

__all__ = [
    "EvaluatePositionRequest",
    "EvaluatePositionResponse",
    "EvaluatePositionUseCase",
]
