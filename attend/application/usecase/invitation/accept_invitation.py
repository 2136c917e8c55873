"""Accept invitation use case."""

import logfire
from pydantic import BaseModel

from attend.application.usecase.base import BaseUseCase, UseCaseResponse, validated
from attend.application.usecase.invitation.schemas import EmployeeItem, InvitationItem
from attend.config import InvitationSettings
from attend.domain.service import InvitationService
from attend.domain.value import AcceptanceOverrides, InvitationToken, TelegramId


class AcceptInvitationRequest(BaseModel):
    """Accept invitation request, sent on behalf of the invitee."""

    token: str
    telegram_id: str
    username: str | None = None
    phone_number: str | None = None  # Replaces the number on the invitation


class AcceptInvitationResponse(UseCaseResponse):
    """Accept invitation response."""

    invitation: InvitationItem | None = None
    employee: EmployeeItem | None = None


class AcceptInvitationUseCase(
    BaseUseCase[AcceptInvitationRequest, AcceptInvitationResponse]
):
    """Use case for registering an employee from an invitation."""

    response_class = AcceptInvitationResponse

    def __init__(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> None:
        """Initialize accept invitation use case.

        Args:
            invitation_service: Invitation domain service
            settings: Invitation settings
        """
        self.invitation_service = invitation_service
        self.settings = settings

    async def _execute(
        self, request: AcceptInvitationRequest
    ) -> AcceptInvitationResponse:
        token = validated(InvitationToken, root=request.token)
        overrides = validated(
            AcceptanceOverrides,
            username=request.username,
            phone_number=request.phone_number,
        )

        with logfire.span(
            "accept_invitation.execute",
            token=token.masked(),
            telegram_id=request.telegram_id,
        ):
            accepted = await self.invitation_service.accept_invitation(
                token,
                TelegramId(request.telegram_id),
                overrides,
            )
            return AcceptInvitationResponse(
                message="Invitation accepted",
                invitation=InvitationItem.from_domain(accepted.invitation, self.settings),
                employee=EmployeeItem.from_domain(accepted.employee),
            )
