"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from attend.domain.model import Invitation
from attend.domain.value import (
    AdminId,
    EmployeeId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
)


def make_invitation(
    status: InvitationStatus = InvitationStatus.PENDING,
    expires_in: timedelta = timedelta(days=7),
    invited_at: datetime | None = None,
    **overrides,
) -> Invitation:
    """Build an invitation directly, bypassing the service.

    Useful for arranging states the service would only reach over time,
    such as a PENDING invitation whose expiry has already passed.

    Args:
        status: Stored status
        expires_in: Expiry relative to now (negative for lapsed invitations)
        invited_at: Creation time (defaults to now)
        **overrides: Any other Invitation field
    """
    now = datetime.now(timezone.utc)
    fields = {
        "id": InvitationId(uuid4()),
        "token": InvitationToken.generate(),
        "first_name": "Ahmed",
        "last_name": "Hassan",
        "department": "Engineering",
        "position": "Developer",
        "phone_number": "+201000000000",
        "invited_by": AdminId("admin-1"),
        "invited_at": invited_at or now,
        "expires_at": now + expires_in,
        "status": status,
    }
    if status == InvitationStatus.ACCEPTED:
        fields["employee_id"] = EmployeeId(uuid4())
        fields["accepted_at"] = now
    fields.update(overrides)
    return Invitation(**fields)
