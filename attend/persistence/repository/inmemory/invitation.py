"""In-memory invitation repository for testing."""

from collections.abc import Collection, Sequence
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from attend.domain.model.invitation import Invitation
from attend.domain.repository.invitation import InvitationRepository
from attend.domain.value import AdminId, InvitationId, InvitationStatus, InvitationToken


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: list[Invitation] = []

    def snapshot(self) -> list[Invitation]:
        """Copy of the current state, for rolling back an atomic block."""
        return list(self._invitations)

    def restore(self, snapshot: list[Invitation]) -> None:
        """Replace the current state with a snapshot."""
        self._invitations = list(snapshot)

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations:
            if invitation.token.root == token.root:
                return invitation
        return None

    async def find_by_tokens(
        self, tokens: Collection[InvitationToken]
    ) -> list[Invitation]:
        """Find all invitations whose token is in ``tokens``."""
        wanted = {token.root for token in tokens}
        return [inv for inv in self._invitations if inv.token.root in wanted]

    async def add(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Raises:
            IntegrityError: If the token or id is already taken
        """
        for existing in self._invitations:
            if existing.id == invitation.id or existing.token.root == invitation.token.root:
                raise IntegrityError("Duplicate invitation", None, Exception())

        self._invitations.append(invitation)
        return invitation

    async def update_if_status(
        self,
        invitation: Invitation,
        allowed: Collection[InvitationStatus],
        unexpired_at: Optional[datetime] = None,
    ) -> Optional[Invitation]:
        """Conditionally overwrite an invitation."""
        for i, existing in enumerate(self._invitations):
            if existing.id != invitation.id:
                continue
            if existing.status not in allowed:
                return None
            if unexpired_at is not None and existing.expires_at < unexpired_at:
                return None
            self._invitations[i] = invitation
            return invitation
        return None

    async def delete_by_tokens(self, tokens: Collection[InvitationToken]) -> int:
        """Delete non-accepted invitations with the given tokens."""
        wanted = {token.root for token in tokens}
        kept = [
            inv
            for inv in self._invitations
            if inv.token.root not in wanted or inv.status == InvitationStatus.ACCEPTED
        ]
        deleted = len(self._invitations) - len(kept)
        self._invitations = kept
        return deleted

    async def find_page(
        self,
        status: Optional[InvitationStatus] = None,
        invited_by: Optional[AdminId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Sequence[Invitation]:
        """Find invitations, newest first, with pagination."""
        matches = self._matching(status, invited_by)

        # Sort by invited_at descending
        matches.sort(key=lambda inv: inv.invited_at, reverse=True)

        # Apply pagination
        return matches[offset : offset + limit]

    async def count(
        self,
        status: Optional[InvitationStatus] = None,
        invited_by: Optional[AdminId] = None,
    ) -> int:
        """Count invitations matching the filters."""
        return len(self._matching(status, invited_by))

    def _matching(
        self, status: Optional[InvitationStatus], invited_by: Optional[AdminId]
    ) -> list[Invitation]:
        return [
            inv
            for inv in self._invitations
            if (status is None or inv.status == status)
            and (invited_by is None or inv.invited_by == invited_by)
        ]
