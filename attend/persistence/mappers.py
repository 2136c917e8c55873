"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from attend.domain.model import Employee, Invitation
from attend.domain.value import (
    AdminId,
    EmployeeId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    TelegramId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        token=InvitationToken(root=row["token"]),
        first_name=row["first_name"],
        last_name=row.get("last_name"),
        department=row.get("department"),
        position=row.get("position"),
        email=row.get("email"),
        phone_number=row.get("phone_number"),
        invited_by=AdminId(row["invited_by"]),
        invited_at=row["invited_at"],
        expires_at=row["expires_at"],
        status=InvitationStatus(row["status"]),
        employee_id=EmployeeId(_uuid(row["employee_id"]))
        if row.get("employee_id")
        else None,
        accepted_at=row.get("accepted_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Args:
        invitation: Invitation domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = invitation.model_dump()
    # Plain strings for the driver
    data["token"] = invitation.token.root
    data["status"] = invitation.status.value
    return data


def row_to_employee(row: Dict[str, Any]) -> Employee:
    """Convert database row to Employee domain model.

    Args:
        row: Database row as dict

    Returns:
        Employee domain model
    """
    return Employee(
        id=EmployeeId(_uuid(row["id"])),
        telegram_id=TelegramId(row["telegram_id"]),
        first_name=row["first_name"],
        last_name=row.get("last_name"),
        username=row.get("username"),
        phone_number=row.get("phone_number"),
        department=row.get("department"),
        position=row.get("position"),
        is_active=row.get("is_active", True),
        registered_at=row["registered_at"],
    )


def employee_to_dict(employee: Employee) -> Dict[str, Any]:
    """Convert Employee domain model to database dict."""
    return employee.model_dump()
