"""List invitations use case."""

from pydantic import BaseModel, Field

from attend.application.usecase.base import BaseUseCase, UseCaseResponse
from attend.application.usecase.invitation.schemas import InvitationItem
from attend.config import InvitationSettings
from attend.domain.error import ValidationError
from attend.domain.service import InvitationService
from attend.domain.value import AdminId, InvitationStatus


def parse_status(value: str | None) -> InvitationStatus | None:
    """Parse a status filter, ignoring case."""
    if value is None:
        return None
    try:
        return InvitationStatus(value.lower())
    except ValueError as e:
        raise ValidationError(
            f"Unknown invitation status: {value}", {"fields": ["status"]}
        ) from e


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    status: str | None = None  # Case-insensitive, e.g. "pending" or "PENDING"
    invited_by: str | None = None
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size


class ListInvitationsResponse(UseCaseResponse):
    """One page of invitations."""

    invitations: list[InvitationItem] = Field(default_factory=list)
    total: int | None = None
    page: int | None = None
    limit: int | None = None
    total_pages: int | None = None


class ListInvitationsUseCase(
    BaseUseCase[ListInvitationsRequest, ListInvitationsResponse]
):
    """Use case for listing invitations on the admin dashboard."""

    response_class = ListInvitationsResponse

    def __init__(
        self, invitation_service: InvitationService, settings: InvitationSettings
    ) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def _execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        page = await self.invitation_service.list_invitations(
            status=parse_status(request.status),
            invited_by=AdminId(request.invited_by) if request.invited_by else None,
            page=request.page,
            limit=request.limit,
        )
        return ListInvitationsResponse(
            invitations=[
                InvitationItem.from_domain(invitation, self.settings)
                for invitation in page.invitations
            ],
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
        )
