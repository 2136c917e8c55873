"""Invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from attend.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    DeleteInvitationRequest,
    DeleteInvitationResponse,
    DeleteInvitationsRequest,
    DeleteInvitationsResponse,
    DeleteInvitationsUseCase,
    DeleteInvitationUseCase,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    ManageAction,
    ManageInvitationRequest,
    ManageInvitationResponse,
    ManageInvitationUseCase,
    ResolveInvitationRequest,
    ResolveInvitationResponse,
    ResolveInvitationUseCase,
)
from attend.interface.api.errors import to_http

router = APIRouter(
    prefix="/invitations", tags=["invitations"], route_class=DishkaRoute
)


def require_admin(admin_id: str | None) -> str:
    """Return the administrator identity forwarded by the session layer.

    Raises:
        HTTPException: If no administrator identity was supplied
    """
    if not admin_id or not admin_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return admin_id


class CreateInvitationAPIRequest(BaseModel):
    """API request for creating an invitation."""

    first_name: str
    last_name: str | None = None
    department: str | None = None
    position: str | None = None
    email: str | None = None
    phone_number: str | None = None
    expires_in_days: int | None = None


class AcceptInvitationAPIRequest(BaseModel):
    """API request for accepting an invitation."""

    telegram_id: int | str
    username: str | None = None
    phone_number: str | None = None


class ManageInvitationAPIRequest(BaseModel):
    """API request for cancelling, resending or extending an invitation."""

    action: ManageAction
    days: int | None = None


@router.post(
    "",
    response_model=CreateInvitationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invitation(
    request: CreateInvitationAPIRequest,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
    x_admin_id: str | None = Header(default=None),
) -> JSONResponse:
    """Create an invitation and return its bot deep link."""
    admin_id = require_admin(x_admin_id)
    response = await create_invitation_use_case.execute(
        CreateInvitationRequest(invited_by=admin_id, **request.model_dump())
    )
    return to_http(response, success_status=status.HTTP_201_CREATED)


@router.get("", response_model=ListInvitationsResponse)
async def list_invitations(
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    x_admin_id: str | None = Header(default=None),
    status_filter: str | None = Query(default=None, alias="status"),
    invited_by: str | None = Query(default=None),
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
) -> JSONResponse:
    """List invitations, newest first.

    Args:
        list_invitations_use_case: List invitations use case from DI
        x_admin_id: Administrator identity header
        status_filter: Optional status filter, any case
        invited_by: Optional inviting administrator filter
        page: 1-based page number
        limit: Page size

    Returns:
        One page of invitations with totals
    """
    require_admin(x_admin_id)
    response = await list_invitations_use_case.execute(
        ListInvitationsRequest(
            status=status_filter, invited_by=invited_by, page=page, limit=limit
        )
    )
    return to_http(response)


@router.post("/bulk-delete", response_model=DeleteInvitationsResponse)
async def bulk_delete_invitations(
    request: DeleteInvitationsRequest,
    delete_invitations_use_case: FromDishka[DeleteInvitationsUseCase],
    x_admin_id: str | None = Header(default=None),
) -> JSONResponse:
    """Delete several invitations; nothing is deleted if any cannot be."""
    require_admin(x_admin_id)
    response = await delete_invitations_use_case.execute(request)
    return to_http(response)


@router.get("/{token}", response_model=ResolveInvitationResponse)
async def resolve_invitation(
    token: str,
    resolve_invitation_use_case: FromDishka[ResolveInvitationUseCase],
) -> JSONResponse:
    """Check an invitation token.

    Expired and cancelled invitations answer 410, accepted ones 409.
    """
    response = await resolve_invitation_use_case.execute(
        ResolveInvitationRequest(token=token)
    )
    return to_http(response)


@router.post("/{token}/accept", response_model=AcceptInvitationResponse)
async def accept_invitation(
    token: str,
    request: AcceptInvitationAPIRequest,
    accept_invitation_use_case: FromDishka[AcceptInvitationUseCase],
) -> JSONResponse:
    """Accept an invitation and register the employee."""
    response = await accept_invitation_use_case.execute(
        AcceptInvitationRequest(
            token=token,
            telegram_id=str(request.telegram_id),
            username=request.username,
            phone_number=request.phone_number,
        )
    )
    return to_http(response, success_status=status.HTTP_201_CREATED)


@router.put("/{token}/manage", response_model=ManageInvitationResponse)
async def manage_invitation(
    token: str,
    request: ManageInvitationAPIRequest,
    manage_invitation_use_case: FromDishka[ManageInvitationUseCase],
    x_admin_id: str | None = Header(default=None),
) -> JSONResponse:
    """Cancel, resend or extend an invitation."""
    require_admin(x_admin_id)
    response = await manage_invitation_use_case.execute(
        ManageInvitationRequest(token=token, action=request.action, days=request.days)
    )
    return to_http(response)


@router.delete("/{token}/manage", response_model=DeleteInvitationResponse)
async def delete_invitation(
    token: str,
    delete_invitation_use_case: FromDishka[DeleteInvitationUseCase],
    x_admin_id: str | None = Header(default=None),
) -> JSONResponse:
    """Delete a single invitation that has not been accepted."""
    require_admin(x_admin_id)
    response = await delete_invitation_use_case.execute(
        DeleteInvitationRequest(token=token)
    )
    return to_http(response)
