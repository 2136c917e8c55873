"""Invitation use cases."""

from attend.application.usecase.invitation.accept_invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
)
from attend.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
)
from attend.application.usecase.invitation.delete_invitations import (
    DeleteInvitationsRequest,
    DeleteInvitationsResponse,
    DeleteInvitationsUseCase,
)
from attend.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from attend.application.usecase.invitation.manage_invitation import (
    DeleteInvitationRequest,
    DeleteInvitationResponse,
    DeleteInvitationUseCase,
    ManageAction,
    ManageInvitationRequest,
    ManageInvitationResponse,
    ManageInvitationUseCase,
)
from attend.application.usecase.invitation.resolve_invitation import (
    ResolveInvitationRequest,
    ResolveInvitationResponse,
    ResolveInvitationUseCase,
)

__all__ = [
    "AcceptInvitationRequest",
    "AcceptInvitationResponse",
    "AcceptInvitationUseCase",
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "DeleteInvitationRequest",
    "DeleteInvitationResponse",
    "DeleteInvitationUseCase",
    "DeleteInvitationsRequest",
    "DeleteInvitationsResponse",
    "DeleteInvitationsUseCase",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "ManageAction",
    "ManageInvitationRequest",
    "ManageInvitationResponse",
    "ManageInvitationUseCase",
    "ResolveInvitationRequest",
    "ResolveInvitationResponse",
    "ResolveInvitationUseCase",
]
