"""Domain layer errors.

Every error carries an ``ErrorKind`` so the application layer can report it
as a tagged result and the HTTP layer can map it to a status code.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorKind(str, Enum):
    """Closed set of failure kinds reported by the core."""

    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    ALREADY_ACCEPTED = "already_accepted"
    CANCELLED = "cancelled"
    CONFLICT = "conflict"
    INVALID_COORDINATES = "invalid_coordinates"
    STORE_FAILURE = "store_failure"


class DomainError(Exception):
    """Base domain error."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DomainError):
    """Missing or malformed input."""

    kind = ErrorKind.VALIDATION_ERROR


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str, **details: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", details)


class ExpiredError(DomainError):
    """The invitation's expiry time has passed."""

    kind = ErrorKind.EXPIRED

    def __init__(self, expired_now: bool):
        super().__init__("Invitation has expired", {"expired_now": expired_now})


class AlreadyAcceptedError(DomainError):
    """The invitation was already turned into an employee."""

    kind = ErrorKind.ALREADY_ACCEPTED

    def __init__(self, employee_id: str | None):
        super().__init__(
            "Invitation already accepted", {"employee_id": employee_id}
        )


class CancelledError(DomainError):
    """The invitation was cancelled by an administrator."""

    kind = ErrorKind.CANCELLED

    def __init__(self) -> None:
        super().__init__("Invitation has been cancelled")


class ConflictError(DomainError):
    """The operation collides with existing state."""

    kind = ErrorKind.CONFLICT


class InvalidCoordinatesError(DomainError):
    """Latitude/longitude out of range or not finite."""

    kind = ErrorKind.INVALID_COORDINATES

    def __init__(self, latitude: Any, longitude: Any):
        super().__init__(f"Invalid coordinates: ({latitude}, {longitude})")


class StoreFailureError(DomainError):
    """The persistence layer itself failed."""

    kind = ErrorKind.STORE_FAILURE
