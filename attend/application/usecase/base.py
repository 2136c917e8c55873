"""Base use case.

Use cases are the boundary of the core: domain errors and store failures
are turned into tagged responses here and never escape to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

import logfire
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from attend.domain.error import DomainError, ErrorKind, StoreFailureError, ValidationError

M = TypeVar("M", bound=BaseModel)


class UseCaseResponse(BaseModel):
    """Tagged result shared by all use case responses.

    On failure ``error`` names the kind and payload fields are left empty.
    """

    success: bool = True
    error: ErrorKind | None = None
    message: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def failed(cls, exc: DomainError, **payload: Any):
        """Build a failed response from a domain error."""
        return cls(
            success=False,
            error=exc.kind,
            message=exc.message,
            details=exc.details,
            **payload,
        )


RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=UseCaseResponse)


def validated(model: type[M], **data: Any) -> M:
    """Construct a domain value, reporting bad input as a ValidationError."""
    try:
        return model(**data)
    except PydanticValidationError as e:
        errors = e.errors(include_url=False)
        fields = [".".join(str(part) for part in err["loc"]) for err in errors]
        raise ValidationError(errors[0]["msg"], {"fields": fields}) from e


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services."""

    response_class: ClassVar[type[UseCaseResponse]]

    async def execute(self, request: RequestT) -> ResponseT:
        """Run the use case and report failures as a tagged response."""
        try:
            return await self._execute(request)
        except DomainError as e:
            logfire.info(
                "Use case rejected request",
                use_case=type(self).__name__,
                error=e.kind.value,
                reason=e.message,
            )
            return self.response_class.failed(e)
        except SQLAlchemyError as e:
            logfire.error(
                "Store failure", use_case=type(self).__name__, error=str(e)
            )
            return self.response_class.failed(
                StoreFailureError("The invitation store is unavailable")
            )

    @abstractmethod
    async def _execute(self, request: RequestT) -> ResponseT:
        pass
