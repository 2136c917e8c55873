"""In-memory repository implementations for testing."""

from .employee import InMemoryEmployeeRepository
from .invitation import InMemoryInvitationRepository
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryEmployeeRepository",
    "InMemoryInvitationRepository",
    "InMemoryTransactionManager",
]
