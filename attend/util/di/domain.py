"""Domain layer DI providers."""

from dishka import Scope, provide

from attend.config import InvitationSettings
from attend.domain.repository import (
    EmployeeRepository,
    InvitationRepository,
    TransactionManager,
)
from attend.domain.service import AttendanceEligibilityService, InvitationService
from attend.domain.value import OfficeReference
from attend.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        employee_repository: EmployeeRepository,
        transaction_manager: TransactionManager,
        settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            employee_repository=employee_repository,
            transaction_manager=transaction_manager,
            settings=settings,
        )

    @provide
    def get_attendance_eligibility_service(
        self, office: OfficeReference
    ) -> AttendanceEligibilityService:
        """Provide attendance eligibility domain service."""
        return AttendanceEligibilityService(office=office)
