"""Invitation domain service.

Owns the invitation state machine:

    PENDING -> ACCEPTED | EXPIRED | CANCELLED
    EXPIRED -> CANCELLED

Expiry is applied lazily: a PENDING invitation whose expiry has passed is
marked EXPIRED the next time anything resolves it, instead of by a sweeper.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from attend.config import InvitationSettings
from attend.domain.error import (
    AlreadyAcceptedError,
    CancelledError,
    ConflictError,
    ExpiredError,
    NotFoundError,
    StoreFailureError,
    ValidationError,
)
from attend.domain.model import Employee, Invitation
from attend.domain.repository import (
    EmployeeRepository,
    InvitationRepository,
    TransactionManager,
)
from attend.domain.value import (
    AcceptanceOverrides,
    AdminId,
    EmployeeId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    InviteePayload,
    ResolutionOutcome,
    TelegramId,
)
from attend.domain.value.types import TELEGRAM_ID_MAX_LENGTH

from .base import Service

CANCELLABLE = frozenset(
    {InvitationStatus.PENDING, InvitationStatus.EXPIRED, InvitationStatus.CANCELLED}
)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class InvitationResolution:
    """Result of resolving a token.

    ``employee`` is only loaded for accepted invitations.
    """

    invitation: Invitation
    outcome: ResolutionOutcome
    employee: Optional[Employee] = None


@dataclass(frozen=True)
class AcceptedInvitation:
    """An accepted invitation together with the employee it created."""

    invitation: Invitation
    employee: Employee


@dataclass(frozen=True)
class InvitationPage:
    """One page of invitations plus totals for the whole result set."""

    invitations: list[Invitation]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed for ``total`` rows."""
        return math.ceil(self.total / self.limit)


def _positive_int(value: object, name: str) -> int:
    """Return value if it is a positive int, else raise ValidationError."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{name} must be a positive integer")
    return value


def _expiry_after(now: datetime, days: int, name: str) -> datetime:
    """Return ``now`` plus ``days``, rejecting spans past the calendar range."""
    try:
        return now + timedelta(days=days)
    except OverflowError as e:
        raise ValidationError(f"{name} is too large") from e


class InvitationService(Service):
    """Domain service for the invitation lifecycle."""

    span_prefix = "invitation_service"

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        employee_repository: EmployeeRepository,
        transaction_manager: TransactionManager,
        settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            employee_repository: Employee repository
            transaction_manager: Atomic scope for multi-record writes
            settings: Invitation settings (default expiry, page size)
        """
        self.invitation_repository = invitation_repository
        self.employee_repository = employee_repository
        self.transaction_manager = transaction_manager
        self.settings = settings

    async def create_invitation(
        self,
        payload: InviteePayload,
        invited_by: AdminId,
        expires_in_days: Optional[int] = None,
    ) -> Invitation:
        """Create a new pending invitation.

        Args:
            payload: Invitee details to copy into the employee on acceptance
            invited_by: Administrator creating the invitation
            expires_in_days: Lifetime in days (defaults to the configured window)

        Returns:
            Created invitation

        Raises:
            ValidationError: If invited_by is blank or expires_in_days is not
                a positive integer
            StoreFailureError: If the store rejects the new token
        """
        if not invited_by or not invited_by.strip():
            raise ValidationError("invited_by is required")
        days = (
            self.settings.default_expiry_days
            if expires_in_days is None
            else _positive_int(expires_in_days, "expires_in_days")
        )

        with self._span(
            "create_invitation",
            invited_by=invited_by,
            expires_in_days=days,
        ):
            now = utcnow()
            invitation = Invitation(
                id=InvitationId(uuid4()),
                token=InvitationToken.generate(),
                **payload.model_dump(),
                invited_by=invited_by,
                invited_at=now,
                expires_at=_expiry_after(now, days, "expires_in_days"),
                status=InvitationStatus.PENDING,
            )

            try:
                saved = await self.invitation_repository.add(invitation)
            except IntegrityError as e:
                logfire.error(
                    "Invitation insert rejected",
                    invitation_id=str(invitation.id),
                    error=str(e),
                )
                raise StoreFailureError("Failed to store invitation") from e

            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                token=saved.token.masked(),
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def resolve(self, token: InvitationToken) -> InvitationResolution:
        """Look up an invitation and classify it.

        A PENDING invitation past its expiry is transitioned to EXPIRED as a
        side effect; the outcome is then EXPIRED_NOW rather than EXPIRED.

        Args:
            token: Invitation token

        Returns:
            The invitation with its resolution outcome

        Raises:
            NotFoundError: If no invitation has this token
        """
        with self._span("resolve", token=token.masked()):
            invitation = await self._get_by_token(token)
            resolution = await self._classify(invitation, utcnow())
            logfire.info(
                "Invitation resolved",
                invitation_id=str(invitation.id),
                outcome=resolution.outcome.value,
            )
            return resolution

    async def accept_invitation(
        self,
        token: InvitationToken,
        telegram_id: TelegramId,
        overrides: Optional[AcceptanceOverrides] = None,
    ) -> AcceptedInvitation:
        """Turn a live invitation into an employee.

        The employee insert and the invitation update commit together or not
        at all. The invitation update only applies if the stored row is still
        PENDING and unexpired, so of two concurrent accepts only one wins.

        Args:
            token: Invitation token
            telegram_id: Telegram identity of the new employee
            overrides: Username and phone number supplied by the invitee

        Returns:
            The accepted invitation and the created employee

        Raises:
            ValidationError: If telegram_id is blank or too long
            NotFoundError: If no invitation has this token
            ExpiredError: If the invitation has expired
            AlreadyAcceptedError: If the invitation was already accepted
            CancelledError: If the invitation was cancelled
            ConflictError: If an employee already exists for telegram_id, or
                the invitation stopped being valid while accepting
        """
        if not telegram_id or not telegram_id.strip():
            raise ValidationError("telegram_id is required")
        if len(telegram_id) > TELEGRAM_ID_MAX_LENGTH:
            raise ValidationError(
                f"telegram_id must be at most {TELEGRAM_ID_MAX_LENGTH} characters",
                {"fields": ["telegram_id"]},
            )
        overrides = overrides or AcceptanceOverrides()

        with self._span(
            "accept_invitation",
            token=token.masked(),
            telegram_id=telegram_id,
        ):
            now = utcnow()
            invitation = await self._require_live(token, now)

            async with self.transaction_manager.atomic():
                existing = await self.employee_repository.find_by_telegram_id(
                    telegram_id
                )
                if existing:
                    logfire.warn(
                        "Employee already registered",
                        telegram_id=telegram_id,
                        employee_id=str(existing.id),
                    )
                    raise ConflictError(
                        "Employee with this Telegram ID already exists",
                        {"employee_id": str(existing.id)},
                    )

                employee = Employee(
                    id=EmployeeId(uuid4()),
                    telegram_id=telegram_id,
                    first_name=invitation.first_name,
                    last_name=invitation.last_name,
                    username=overrides.username,
                    phone_number=overrides.phone_number or invitation.phone_number,
                    department=invitation.department,
                    position=invitation.position,
                    is_active=True,
                    registered_at=now,
                )
                try:
                    await self.employee_repository.add(employee)
                except IntegrityError as e:
                    logfire.warn(
                        "Duplicate employee insert", telegram_id=telegram_id
                    )
                    raise ConflictError(
                        "Employee with this Telegram ID already exists"
                    ) from e

                accepted = await self.invitation_repository.update_if_status(
                    invitation.evolve(
                        status=InvitationStatus.ACCEPTED,
                        accepted_at=now,
                        employee_id=employee.id,
                    ),
                    allowed={InvitationStatus.PENDING},
                    unexpired_at=now,
                )
                if accepted is None:
                    logfire.warn(
                        "Invitation changed during acceptance",
                        invitation_id=str(invitation.id),
                    )
                    raise ConflictError("Invitation is no longer valid")

            logfire.info(
                "Invitation accepted",
                invitation_id=str(accepted.id),
                employee_id=str(employee.id),
            )
            return AcceptedInvitation(invitation=accepted, employee=employee)

    async def cancel_invitation(self, token: InvitationToken) -> Invitation:
        """Cancel any invitation that has not been accepted.

        Args:
            token: Invitation token

        Returns:
            The cancelled invitation

        Raises:
            NotFoundError: If no invitation has this token
            AlreadyAcceptedError: If the invitation was accepted
            ConflictError: If it was accepted while cancelling
        """
        with self._span(
            "cancel_invitation", token=token.masked()
        ):
            invitation = await self._get_by_token(token)
            if invitation.status == InvitationStatus.ACCEPTED:
                logfire.warn(
                    "Cannot cancel accepted invitation",
                    invitation_id=str(invitation.id),
                )
                raise AlreadyAcceptedError(str(invitation.employee_id))

            cancelled = await self.invitation_repository.update_if_status(
                invitation.evolve(status=InvitationStatus.CANCELLED),
                allowed=CANCELLABLE,
            )
            if cancelled is None:
                raise ConflictError("Invitation changed while cancelling")

            logfire.info("Invitation cancelled", invitation_id=str(cancelled.id))
            return cancelled

    async def resend_invitation(self, token: InvitationToken) -> Invitation:
        """Give a pending invitation a fresh default expiry window.

        Only the expiry changes; the invitee is not messaged again.

        Raises:
            NotFoundError, ExpiredError, AlreadyAcceptedError, CancelledError,
            ConflictError: As for extend_invitation
        """
        with self._span(
            "resend_invitation", token=token.masked()
        ):
            return await self._reschedule(token, self.settings.default_expiry_days)

    async def extend_invitation(
        self, token: InvitationToken, days: Optional[int] = None
    ) -> Invitation:
        """Set a pending invitation to expire ``days`` from now.

        The new expiry counts from now, not from the old expiry.

        Args:
            token: Invitation token
            days: New lifetime in days (defaults to the configured window)

        Returns:
            The updated invitation

        Raises:
            ValidationError: If days is not a positive integer
            NotFoundError: If no invitation has this token
            ExpiredError: If the invitation has expired
            AlreadyAcceptedError: If the invitation was accepted
            CancelledError: If the invitation was cancelled
            ConflictError: If it changed state while extending
        """
        days = (
            self.settings.default_expiry_days
            if days is None
            else _positive_int(days, "days")
        )
        with self._span(
            "extend_invitation", token=token.masked(), days=days
        ):
            return await self._reschedule(token, days)

    async def delete_invitation(self, token: InvitationToken) -> None:
        """Delete a single non-accepted invitation.

        Raises:
            NotFoundError: If no invitation has this token
            ConflictError: If the invitation was accepted
        """
        with self._span(
            "delete_invitation", token=token.masked()
        ):
            invitation = await self._get_by_token(token)
            if invitation.status == InvitationStatus.ACCEPTED:
                logfire.warn(
                    "Cannot delete accepted invitation",
                    invitation_id=str(invitation.id),
                )
                raise ConflictError(
                    "Cannot delete accepted invitation",
                    {"accepted_tokens": [token.root]},
                )

            deleted = await self.invitation_repository.delete_by_tokens([token])
            if deleted == 0:
                raise ConflictError("Invitation changed while deleting")

            logfire.info("Invitation deleted", invitation_id=str(invitation.id))

    async def bulk_delete(self, tokens: Sequence[InvitationToken]) -> int:
        """Delete several invitations, all or nothing.

        Args:
            tokens: Tokens of the invitations to delete (duplicates ignored)

        Returns:
            Number of deleted invitations

        Raises:
            ValidationError: If no tokens were given
            NotFoundError: If any token has no invitation
            ConflictError: If any invitation is accepted
        """
        if not tokens:
            raise ValidationError("At least one token is required")
        unique = list({token.root: token for token in tokens}.values())

        with self._span("bulk_delete", count=len(unique)):
            found = await self.invitation_repository.find_by_tokens(unique)

            found_roots = {invitation.token.root for invitation in found}
            missing = [token.root for token in unique if token.root not in found_roots]
            if missing:
                logfire.warn("Bulk delete with unknown tokens", missing=len(missing))
                raise NotFoundError(
                    "Invitation",
                    f"{len(missing)} of {len(unique)} tokens",
                    missing_tokens=missing,
                )

            accepted = [
                invitation.token.root
                for invitation in found
                if invitation.status == InvitationStatus.ACCEPTED
            ]
            if accepted:
                logfire.warn("Bulk delete of accepted invitations", accepted=len(accepted))
                raise ConflictError(
                    f"Cannot delete {len(accepted)} accepted invitation(s)",
                    {"accepted_tokens": accepted},
                )

            async with self.transaction_manager.atomic():
                deleted = await self.invitation_repository.delete_by_tokens(unique)
                if deleted != len(unique):
                    raise ConflictError(
                        "Invitations changed while deleting; nothing was deleted"
                    )

            logfire.info("Invitations bulk deleted", count=deleted)
            return deleted

    async def list_invitations(
        self,
        status: Optional[InvitationStatus] = None,
        invited_by: Optional[AdminId] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> InvitationPage:
        """List invitations, newest first.

        Args:
            status: Optional status filter
            invited_by: Optional inviting administrator filter
            page: 1-based page number
            limit: Page size (defaults to the configured page size)

        Returns:
            The requested page with totals

        Raises:
            ValidationError: If page or limit is not a positive integer
        """
        page = _positive_int(page, "page")
        limit = (
            self.settings.default_page_size
            if limit is None
            else _positive_int(limit, "limit")
        )

        with self._span(
            "list_invitations",
            status=status.value if status else None,
            invited_by=invited_by,
            page=page,
            limit=limit,
        ):
            invitations = await self.invitation_repository.find_page(
                status, invited_by, limit, (page - 1) * limit
            )
            total = await self.invitation_repository.count(status, invited_by)
            logfire.info(
                "Invitations listed", count=len(invitations), total=total
            )
            return InvitationPage(
                invitations=list(invitations), total=total, page=page, limit=limit
            )

    async def _get_by_token(self, token: InvitationToken) -> Invitation:
        invitation = await self.invitation_repository.find_by_token(token)
        if not invitation:
            logfire.warn("Invitation not found", token=token.masked())
            raise NotFoundError("Invitation", token.masked())
        return invitation

    async def _classify(
        self, invitation: Invitation, now: datetime
    ) -> InvitationResolution:
        """Classify an invitation, expiring it lazily if it has lapsed."""
        if invitation.status == InvitationStatus.PENDING:
            if not invitation.is_lapsed(now):
                return InvitationResolution(invitation, ResolutionOutcome.VALID)

            expired = await self.invitation_repository.update_if_status(
                invitation.evolve(status=InvitationStatus.EXPIRED),
                allowed={InvitationStatus.PENDING},
            )
            if expired is not None:
                logfire.info(
                    "Invitation expired on read",
                    invitation_id=str(invitation.id),
                    expires_at=invitation.expires_at.isoformat(),
                )
                return InvitationResolution(expired, ResolutionOutcome.EXPIRED_NOW)

            # Someone else changed the row first; classify what is stored now
            current = await self.invitation_repository.find_by_id(invitation.id)
            if current is None:
                raise NotFoundError("Invitation", invitation.token.masked())
            return await self._classify(current, now)

        if invitation.status == InvitationStatus.EXPIRED:
            return InvitationResolution(invitation, ResolutionOutcome.EXPIRED)

        if invitation.status == InvitationStatus.ACCEPTED:
            employee = None
            if invitation.employee_id:
                employee = await self.employee_repository.find_by_id(
                    invitation.employee_id
                )
            return InvitationResolution(
                invitation, ResolutionOutcome.ACCEPTED, employee
            )

        return InvitationResolution(invitation, ResolutionOutcome.CANCELLED)

    async def _require_live(self, token: InvitationToken, now: datetime) -> Invitation:
        """Resolve a token and raise unless the invitation is pending and unexpired."""
        invitation = await self._get_by_token(token)
        resolution = await self._classify(invitation, now)

        match resolution.outcome:
            case ResolutionOutcome.VALID:
                return resolution.invitation
            case ResolutionOutcome.EXPIRED_NOW | ResolutionOutcome.EXPIRED:
                raise ExpiredError(
                    expired_now=resolution.outcome == ResolutionOutcome.EXPIRED_NOW
                )
            case ResolutionOutcome.ACCEPTED:
                raise AlreadyAcceptedError(str(resolution.invitation.employee_id))
            case _:
                raise CancelledError()

    async def _reschedule(self, token: InvitationToken, days: int) -> Invitation:
        """Move the expiry of a stored PENDING invitation to ``days`` from now.

        Only the stored status counts, so a lapsed but still PENDING
        invitation can be revived.
        """
        now = utcnow()
        expires_at = _expiry_after(now, days, "days")
        invitation = await self._get_by_token(token)

        match invitation.status:
            case InvitationStatus.EXPIRED:
                raise ExpiredError(expired_now=False)
            case InvitationStatus.ACCEPTED:
                raise AlreadyAcceptedError(str(invitation.employee_id))
            case InvitationStatus.CANCELLED:
                raise CancelledError()

        updated = await self.invitation_repository.update_if_status(
            invitation.evolve(expires_at=expires_at),
            allowed={InvitationStatus.PENDING},
        )
        if updated is None:
            raise ConflictError("Invitation is no longer valid")

        logfire.info(
            "Invitation expiry moved",
            invitation_id=str(updated.id),
            expires_at=updated.expires_at.isoformat(),
        )
        return updated
