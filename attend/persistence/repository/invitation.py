"""PostgreSQL implementation of Invitation repository."""

from collections.abc import Collection, Sequence
from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from attend.domain.model import Invitation
from attend.domain.repository import InvitationRepository
from attend.domain.value import AdminId, InvitationId, InvitationStatus, InvitationToken
from attend.persistence.mappers import invitation_to_dict, row_to_invitation
from attend.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_tokens(
        self, tokens: Collection[InvitationToken]
    ) -> list[Invitation]:
        """Find all invitations whose token is in ``tokens``."""
        stmt = select(invitations_table).where(
            invitations_table.c.token.in_([token.root for token in tokens])
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def add(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Raises:
            IntegrityError: If the token or id is already taken
        """
        stmt = insert(invitations_table).values(**invitation_to_dict(invitation))
        await self.session.execute(stmt)
        await self.session.flush()
        return invitation

    async def update_if_status(
        self,
        invitation: Invitation,
        allowed: Collection[InvitationStatus],
        unexpired_at: Optional[datetime] = None,
    ) -> Optional[Invitation]:
        """Conditionally overwrite an invitation in a single UPDATE.

        The WHERE clause carries the condition, so the row lock taken by the
        UPDATE decides between concurrent writers.
        """
        conditions = [
            invitations_table.c.id == invitation.id,
            invitations_table.c.status.in_([status.value for status in allowed]),
        ]
        if unexpired_at is not None:
            conditions.append(invitations_table.c.expires_at >= unexpired_at)

        values = invitation_to_dict(invitation)
        values.pop("id")
        stmt = (
            update(invitations_table)
            .where(and_(*conditions))
            .values(**values)
            .returning(invitations_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def delete_by_tokens(self, tokens: Collection[InvitationToken]) -> int:
        """Delete non-accepted invitations with the given tokens."""
        stmt = delete(invitations_table).where(
            and_(
                invitations_table.c.token.in_([token.root for token in tokens]),
                invitations_table.c.status != InvitationStatus.ACCEPTED.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def find_page(
        self,
        status: Optional[InvitationStatus] = None,
        invited_by: Optional[AdminId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Sequence[Invitation]:
        """Find invitations, newest first, with pagination."""
        stmt = select(invitations_table)
        for condition in self._filters(status, invited_by):
            stmt = stmt.where(condition)
        stmt = (
            stmt.order_by(
                invitations_table.c.invited_at.desc(), invitations_table.c.id
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def count(
        self,
        status: Optional[InvitationStatus] = None,
        invited_by: Optional[AdminId] = None,
    ) -> int:
        """Count invitations matching the filters."""
        stmt = select(func.count()).select_from(invitations_table)
        for condition in self._filters(status, invited_by):
            stmt = stmt.where(condition)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    def _filters(
        status: Optional[InvitationStatus], invited_by: Optional[AdminId]
    ) -> list:
        conditions = []
        if status is not None:
            conditions.append(invitations_table.c.status == status.value)
        if invited_by is not None:
            conditions.append(invitations_table.c.invited_by == invited_by)
        return conditions
