"""PostgreSQL repository implementations."""

from attend.persistence.repository.employee import PostgresEmployeeRepository
from attend.persistence.repository.invitation import PostgresInvitationRepository
from attend.persistence.repository.transaction import PostgresTransactionManager

__all__ = [
    "PostgresEmployeeRepository",
    "PostgresInvitationRepository",
    "PostgresTransactionManager",
]
