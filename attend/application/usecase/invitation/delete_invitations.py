"""Bulk delete invitations use case."""

import logfire
from pydantic import BaseModel

from attend.application.usecase.base import BaseUseCase, UseCaseResponse, validated
from attend.domain.service import InvitationService
from attend.domain.value import InvitationToken


class DeleteInvitationsRequest(BaseModel):
    """Bulk delete request."""

    tokens: list[str]


class DeleteInvitationsResponse(UseCaseResponse):
    """Bulk delete response."""

    deleted_count: int | None = None


class DeleteInvitationsUseCase(
    BaseUseCase[DeleteInvitationsRequest, DeleteInvitationsResponse]
):
    """Use case for deleting several invitations at once.

    Either every listed invitation is deleted or none is.
    """

    response_class = DeleteInvitationsResponse

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def _execute(
        self, request: DeleteInvitationsRequest
    ) -> DeleteInvitationsResponse:
        tokens = [validated(InvitationToken, root=token) for token in request.tokens]

        with logfire.span("delete_invitations.execute", requested=len(tokens)):
            deleted = await self.invitation_service.bulk_delete(tokens)
            return DeleteInvitationsResponse(
                message=f"Deleted {deleted} invitation(s)", deleted_count=deleted
            )
