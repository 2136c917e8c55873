"""Mock persistence providers for testing."""

from dishka import Scope, provide

from attend.domain.repository import (
    EmployeeRepository,
    InvitationRepository,
    TransactionManager,
)
from attend.persistence.repository.inmemory import (
    InMemoryEmployeeRepository,
    InMemoryInvitationRepository,
    InMemoryTransactionManager,
)
from attend.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that state survives across requests made
    against one container; each test builds its own container for isolation.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invitation_store(self) -> InMemoryInvitationRepository:
        """Provide the in-memory invitation store."""
        return InMemoryInvitationRepository()

    @provide(scope=Scope.APP)
    def get_employee_store(self) -> InMemoryEmployeeRepository:
        """Provide the in-memory employee store."""
        return InMemoryEmployeeRepository()

    @provide(scope=Scope.APP)
    def get_invitation_repository(
        self, store: InMemoryInvitationRepository
    ) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return store

    @provide(scope=Scope.APP)
    def get_employee_repository(
        self, store: InMemoryEmployeeRepository
    ) -> EmployeeRepository:
        """Provide in-memory employee repository."""
        return store

    @provide(scope=Scope.APP)
    def get_transaction_manager(
        self,
        invitations: InMemoryInvitationRepository,
        employees: InMemoryEmployeeRepository,
    ) -> TransactionManager:
        """Provide transaction manager spanning both in-memory stores."""
        return InMemoryTransactionManager(invitations, employees)
