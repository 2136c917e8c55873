"""Strongly typed identifiers for attendance domain entities.

Using NewType keeps invitation, employee and admin identifiers from being
mixed up at call sites.
"""

from typing import NewType
from uuid import UUID

InvitationId = NewType("InvitationId", UUID)
EmployeeId = NewType("EmployeeId", UUID)

# Opaque identifier of the administrator, supplied by the session layer
AdminId = NewType("AdminId", str)

# Telegram user ID of an employee (external identity key)
TelegramId = NewType("TelegramId", str)
