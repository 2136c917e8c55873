"""Resolve invitation use case."""

from pydantic import BaseModel

from attend.application.usecase.base import BaseUseCase, UseCaseResponse, validated
from attend.application.usecase.invitation.schemas import EmployeeItem, InvitationItem
from attend.config import InvitationSettings
from attend.domain.error import AlreadyAcceptedError, CancelledError, ExpiredError
from attend.domain.service import InvitationService
from attend.domain.value import InvitationToken, ResolutionOutcome


class ResolveInvitationRequest(BaseModel):
    """Resolve invitation request."""

    token: str


class ResolveInvitationResponse(UseCaseResponse):
    """Resolve invitation response.

    ``outcome`` is set whenever the token was found, including for the
    failed outcomes, so callers can tell "expired now" from "already expired".
    """

    outcome: ResolutionOutcome | None = None
    invitation: InvitationItem | None = None
    employee: EmployeeItem | None = None  # Only for accepted invitations


class ResolveInvitationUseCase(
    BaseUseCase[ResolveInvitationRequest, ResolveInvitationResponse]
):
    """Use case for checking an invitation token before acceptance.

    Lets the bot show the invitee's details or explain why the link no
    longer works.
    """

    response_class = ResolveInvitationResponse

    def __init__(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def _execute(
        self, request: ResolveInvitationRequest
    ) -> ResolveInvitationResponse:
        token = validated(InvitationToken, root=request.token)
        resolution = await self.invitation_service.resolve(token)

        outcome = resolution.outcome
        invitation = InvitationItem.from_domain(resolution.invitation, self.settings)

        match outcome:
            case ResolutionOutcome.VALID:
                return ResolveInvitationResponse(
                    message="Valid invitation", outcome=outcome, invitation=invitation
                )
            case ResolutionOutcome.EXPIRED_NOW | ResolutionOutcome.EXPIRED:
                error = ExpiredError(expired_now=outcome == ResolutionOutcome.EXPIRED_NOW)
                return ResolveInvitationResponse.failed(
                    error, outcome=outcome, invitation=invitation
                )
            case ResolutionOutcome.ACCEPTED:
                employee = resolution.employee
                return ResolveInvitationResponse.failed(
                    AlreadyAcceptedError(invitation.employee_id),
                    outcome=outcome,
                    invitation=invitation,
                    employee=EmployeeItem.from_domain(employee) if employee else None,
                )
            case _:
                return ResolveInvitationResponse.failed(
                    CancelledError(), outcome=outcome, invitation=invitation
                )
