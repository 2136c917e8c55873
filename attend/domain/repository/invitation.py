"""Invitation repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection, Sequence
from datetime import datetime
from typing import Optional

from attend.domain.model.invitation import Invitation
from attend.domain.value import AdminId, InvitationId, InvitationStatus, InvitationToken


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by token.

        Used when an invitee opens the bot deep link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_tokens(
        self, tokens: Collection[InvitationToken]
    ) -> list[Invitation]:
        """Find all invitations whose token is in ``tokens``.

        Args:
            tokens: Tokens to look up

        Returns:
            Matching invitations, in no particular order
        """
        pass

    @abstractmethod
    async def add(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Args:
            invitation: The invitation to insert

        Returns:
            The saved invitation

        Raises:
            IntegrityError: If the token or id is already taken
        """
        pass

    @abstractmethod
    async def update_if_status(
        self,
        invitation: Invitation,
        allowed: Collection[InvitationStatus],
        unexpired_at: Optional[datetime] = None,
    ) -> Optional[Invitation]:
        """Conditionally overwrite an invitation (compare-and-set).

        The stored row is replaced with ``invitation`` only if its current
        status is in ``allowed`` and, when ``unexpired_at`` is given, its
        stored expiry is not before that instant.

        Args:
            invitation: The new version of the invitation
            allowed: Statuses the stored row may currently have
            unexpired_at: Optional instant the stored row must not have lapsed at

        Returns:
            The saved invitation, or None if the condition did not hold
        """
        pass

    @abstractmethod
    async def delete_by_tokens(self, tokens: Collection[InvitationToken]) -> int:
        """Delete non-accepted invitations with the given tokens.

        Accepted invitations are never deleted, even if listed.

        Args:
            tokens: Tokens of the invitations to delete

        Returns:
            Number of deleted invitations
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        status: Optional[InvitationStatus] = None,
        invited_by: Optional[AdminId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Sequence[Invitation]:
        """Find invitations, newest first, with pagination.

        Args:
            status: Optional status filter
            invited_by: Optional inviting administrator filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            Invitations ordered by invited_at descending
        """
        pass

    @abstractmethod
    async def count(
        self,
        status: Optional[InvitationStatus] = None,
        invited_by: Optional[AdminId] = None,
    ) -> int:
        """Count invitations matching the filters.

        Args:
            status: Optional status filter
            invited_by: Optional inviting administrator filter

        Returns:
            Number of invitations
        """
        pass
