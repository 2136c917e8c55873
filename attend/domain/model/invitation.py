"""Invitation entity.

Administrators invite employees ahead of time; the invitee opens a bot deep
link carrying the token and, on acceptance, becomes an employee.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from attend.domain.model.common import DomainModel
from attend.domain.value import (
    AdminId,
    EmployeeId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    InviteePayload,
)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - Looked up externally by token, never by id
    - Expires lazily: a lapsed PENDING invitation is marked EXPIRED when read
    - Accepted at most once; employee_id is set exactly when status is ACCEPTED
    - Accepted invitations can never be cancelled or deleted
    """

    id: InvitationId
    token: InvitationToken
    first_name: str = Field(min_length=1, max_length=100)
    last_name: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    invited_by: AdminId
    invited_at: datetime
    expires_at: datetime
    status: InvitationStatus = InvitationStatus.PENDING
    employee_id: Optional[EmployeeId] = None
    accepted_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_acceptance_link(self) -> "Invitation":
        """Employee link and acceptance time exist only on accepted invitations."""
        accepted = self.status == InvitationStatus.ACCEPTED
        if accepted != (self.employee_id is not None):
            raise ValueError("employee_id must be set if and only if status is accepted")
        if accepted != (self.accepted_at is not None):
            raise ValueError("accepted_at must be set if and only if status is accepted")
        return self

    @property
    def payload(self) -> InviteePayload:
        """The invitee details captured at creation."""
        return InviteePayload(
            first_name=self.first_name,
            last_name=self.last_name,
            department=self.department,
            position=self.position,
            email=self.email,
            phone_number=self.phone_number,
        )

    def is_lapsed(self, now: datetime) -> bool:
        """Whether the expiry time has passed at ``now``."""
        return self.expires_at < now
