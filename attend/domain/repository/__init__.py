"""Repository interfaces for the attendance domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from attend.domain.repository.employee import EmployeeRepository
from attend.domain.repository.invitation import InvitationRepository
from attend.domain.repository.transaction import TransactionManager

__all__ = [
    "EmployeeRepository",
    "InvitationRepository",
    "TransactionManager",
]
