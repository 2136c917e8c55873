"""Mapping of tagged use case results to HTTP responses."""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from attend.application.usecase.base import UseCaseResponse
from attend.domain.error import ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_COORDINATES: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ALREADY_ACCEPTED: status.HTTP_409_CONFLICT,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.EXPIRED: status.HTTP_410_GONE,
    ErrorKind.CANCELLED: status.HTTP_410_GONE,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http(
    response: UseCaseResponse, success_status: int = status.HTTP_200_OK
) -> JSONResponse:
    """Render a use case response with the status code its tag maps to."""
    status_code = (
        success_status if response.success else STATUS_BY_KIND[response.error]
    )
    return JSONResponse(
        status_code=status_code, content=response.model_dump(mode="json")
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies and parameters with 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": ErrorKind.VALIDATION_ERROR.value,
            "message": "Invalid request",
            "details": {
                "errors": [
                    {
                        "loc": [str(part) for part in error["loc"]],
                        "message": error["msg"],
                    }
                    for error in exc.errors()
                ]
            },
        },
    )
