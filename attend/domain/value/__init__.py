"""Domain value objects for the attendance tracker."""

from attend.domain.value.identifiers import (
    AdminId,
    EmployeeId,
    InvitationId,
    TelegramId,
)
from attend.domain.value.types import (
    AcceptanceOverrides,
    Coordinates,
    InvitationStatus,
    InvitationToken,
    InviteePayload,
    OfficeReference,
    ResolutionOutcome,
)

__all__ = [
    # Identifiers
    "AdminId",
    "EmployeeId",
    "InvitationId",
    "TelegramId",
    # Types
    "AcceptanceOverrides",
    "Coordinates",
    "InvitationStatus",
    "InvitationToken",
    "InviteePayload",
    "OfficeReference",
    "ResolutionOutcome",
]
