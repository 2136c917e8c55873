"""Response items shared by the invitation use cases."""

from datetime import datetime

from pydantic import BaseModel

from attend.config import InvitationSettings
from attend.domain.model import Employee, Invitation
from attend.domain.value import InvitationStatus


class InvitationItem(BaseModel):
    """Invitation as exposed to callers."""

    id: str
    token: str
    invitation_link: str
    first_name: str
    last_name: str | None
    department: str | None
    position: str | None
    email: str | None
    phone_number: str | None
    invited_by: str
    invited_at: datetime
    expires_at: datetime
    status: InvitationStatus
    employee_id: str | None
    accepted_at: datetime | None

    @classmethod
    def from_domain(
        cls, invitation: Invitation, settings: InvitationSettings
    ) -> "InvitationItem":
        return cls(
            id=str(invitation.id),
            token=invitation.token.root,
            invitation_link=settings.invitation_link(invitation.token.root),
            first_name=invitation.first_name,
            last_name=invitation.last_name,
            department=invitation.department,
            position=invitation.position,
            email=invitation.email,
            phone_number=invitation.phone_number,
            invited_by=invitation.invited_by,
            invited_at=invitation.invited_at,
            expires_at=invitation.expires_at,
            status=invitation.status,
            employee_id=str(invitation.employee_id) if invitation.employee_id else None,
            accepted_at=invitation.accepted_at,
        )


class EmployeeItem(BaseModel):
    """Employee as exposed to callers."""

    id: str
    telegram_id: str
    first_name: str
    last_name: str | None
    username: str | None
    phone_number: str | None
    department: str | None
    position: str | None
    is_active: bool
    registered_at: datetime

    @classmethod
    def from_domain(cls, employee: Employee) -> "EmployeeItem":
        return cls(
            id=str(employee.id),
            telegram_id=employee.telegram_id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            username=employee.username,
            phone_number=employee.phone_number,
            department=employee.department,
            position=employee.position,
            is_active=employee.is_active,
            registered_at=employee.registered_at,
        )
