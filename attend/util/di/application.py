"""Application layer DI providers."""

from dishka import Scope, provide

from attend.application.usecase.attendance import EvaluatePositionUseCase
from attend.application.usecase.invitation import (
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    DeleteInvitationsUseCase,
    DeleteInvitationUseCase,
    ListInvitationsUseCase,
    ManageInvitationUseCase,
    ResolveInvitationUseCase,
)
from attend.config import InvitationSettings
from attend.domain.service import AttendanceEligibilityService, InvitationService
from attend.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invitation_use_case(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_resolve_invitation_use_case(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> ResolveInvitationUseCase:
        """Provide resolve invitation use case."""
        return ResolveInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_invitation_use_case(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_manage_invitation_use_case(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> ManageInvitationUseCase:
        """Provide manage invitation use case."""
        return ManageInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> DeleteInvitationUseCase:
        """Provide delete invitation use case."""
        return DeleteInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> DeleteInvitationsUseCase:
        """Provide bulk delete invitations use case."""
        return DeleteInvitationsUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            invitation_service=invitation_service, settings=settings
        )

    # Attendance use cases
    @provide(scope=Scope.REQUEST)
    def get_evaluate_position_use_case(
        self, eligibility_service: AttendanceEligibilityService
    ) -> EvaluatePositionUseCase:
        """Provide evaluate position use case."""
        return EvaluatePositionUseCase(eligibility_service=eligibility_service)
