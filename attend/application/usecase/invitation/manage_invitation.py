"""Administrative invitation management use cases."""

from enum import Enum

from pydantic import BaseModel

from attend.application.usecase.base import BaseUseCase, UseCaseResponse, validated
from attend.application.usecase.invitation.schemas import InvitationItem
from attend.config import InvitationSettings
from attend.domain.service import InvitationService
from attend.domain.value import InvitationToken


class ManageAction(str, Enum):
    """Administrative action on a single invitation."""

    CANCEL = "cancel"
    RESEND = "resend"
    EXTEND = "extend"


class ManageInvitationRequest(BaseModel):
    """Manage invitation request."""

    token: str
    action: ManageAction
    days: int | None = None  # Only used by extend


class ManageInvitationResponse(UseCaseResponse):
    """Manage invitation response."""

    action: ManageAction | None = None
    invitation: InvitationItem | None = None


class ManageInvitationUseCase(
    BaseUseCase[ManageInvitationRequest, ManageInvitationResponse]
):
    """Use case for cancelling, resending or extending an invitation."""

    response_class = ManageInvitationResponse

    def __init__(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def _execute(
        self, request: ManageInvitationRequest
    ) -> ManageInvitationResponse:
        token = validated(InvitationToken, root=request.token)

        match request.action:
            case ManageAction.CANCEL:
                invitation = await self.invitation_service.cancel_invitation(token)
                message = "Invitation cancelled"
            case ManageAction.RESEND:
                invitation = await self.invitation_service.resend_invitation(token)
                message = "Invitation resent"
            case ManageAction.EXTEND:
                invitation = await self.invitation_service.extend_invitation(
                    token, request.days
                )
                message = "Invitation extended"

        return ManageInvitationResponse(
            message=message,
            action=request.action,
            invitation=InvitationItem.from_domain(invitation, self.settings),
        )


class DeleteInvitationRequest(BaseModel):
    """Delete invitation request."""

    token: str


class DeleteInvitationResponse(UseCaseResponse):
    """Delete invitation response."""

    token: str | None = None


class DeleteInvitationUseCase(
    BaseUseCase[DeleteInvitationRequest, DeleteInvitationResponse]
):
    """Use case for deleting a single non-accepted invitation."""

    response_class = DeleteInvitationResponse

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def _execute(
        self, request: DeleteInvitationRequest
    ) -> DeleteInvitationResponse:
        token = validated(InvitationToken, root=request.token)
        await self.invitation_service.delete_invitation(token)
        return DeleteInvitationResponse(message="Invitation deleted", token=token.root)
