"""Create invitation use case."""

import logfire
from pydantic import BaseModel

from attend.application.usecase.base import BaseUseCase, UseCaseResponse, validated
from attend.application.usecase.invitation.schemas import InvitationItem
from attend.config import InvitationSettings
from attend.domain.service import InvitationService
from attend.domain.value import AdminId, InviteePayload


class CreateInvitationRequest(BaseModel):
    """Request to invite a new employee."""

    invited_by: str
    first_name: str
    last_name: str | None = None
    department: str | None = None
    position: str | None = None
    email: str | None = None
    phone_number: str | None = None
    expires_in_days: int | None = None  # Defaults to the configured window


class CreateInvitationResponse(UseCaseResponse):
    """Response after creating an invitation."""

    invitation: InvitationItem | None = None


class CreateInvitationUseCase(
    BaseUseCase[CreateInvitationRequest, CreateInvitationResponse]
):
    """Use case for creating an invitation and its bot deep link."""

    response_class = CreateInvitationResponse

    def __init__(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            settings: Invitation settings (used to build the deep link)
        """
        self.invitation_service = invitation_service
        self.settings = settings

    async def _execute(
        self, request: CreateInvitationRequest
    ) -> CreateInvitationResponse:
        payload = validated(
            InviteePayload,
            **request.model_dump(exclude={"invited_by", "expires_in_days"}),
        )

        with logfire.span("create_invitation.execute", invited_by=request.invited_by):
            invitation = await self.invitation_service.create_invitation(
                payload,
                AdminId(request.invited_by),
                request.expires_in_days,
            )
            return CreateInvitationResponse(
                message="Invitation created",
                invitation=InvitationItem.from_domain(invitation, self.settings),
            )
