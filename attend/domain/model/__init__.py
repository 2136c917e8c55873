"""Domain model entities."""

from attend.domain.model.employee import Employee
from attend.domain.model.invitation import Invitation

__all__ = [
    "Employee",
    "Invitation",
]
