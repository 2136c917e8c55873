"""Tests for the invitation management use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from attend.application.usecase.invitation import (
    DeleteInvitationRequest,
    DeleteInvitationUseCase,
    ManageAction,
    ManageInvitationRequest,
    ManageInvitationUseCase,
)
from attend.domain.error import ErrorKind
from attend.domain.repository import InvitationRepository
from attend.domain.value import InvitationStatus
from tests.factories import make_invitation
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestManageInvitationUseCase:
    """Tests for ManageInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_cancel(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        use_case = await unit_env.get(ManageInvitationUseCase)
        invitation = await repo.add(make_invitation())

        # Act
        response = await use_case.execute(
            ManageInvitationRequest(
                token=invitation.token.root, action=ManageAction.CANCEL
            )
        )

        # Assert
        assert response.success is True
        assert response.action == ManageAction.CANCEL
        assert response.invitation.status == InvitationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_extend(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        use_case = await unit_env.get(ManageInvitationUseCase)
        invitation = await repo.add(make_invitation(expires_in=timedelta(days=1)))

        # Act
        before = datetime.now(timezone.utc)
        response = await use_case.execute(
            ManageInvitationRequest(
                token=invitation.token.root, action=ManageAction.EXTEND, days=10
            )
        )

        # Assert
        assert response.success is True
        assert response.invitation.expires_at >= before + timedelta(days=10)

    @pytest.mark.asyncio
    async def test_resend(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        use_case = await unit_env.get(ManageInvitationUseCase)
        invitation = await repo.add(make_invitation(expires_in=timedelta(hours=1)))

        # Act
        response = await use_case.execute(
            ManageInvitationRequest(
                token=invitation.token.root, action=ManageAction.RESEND
            )
        )

        # Assert
        assert response.success is True
        assert response.invitation.expires_at > invitation.expires_at

    @pytest.mark.asyncio
    async def test_cancel_accepted_is_rejected(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        use_case = await unit_env.get(ManageInvitationUseCase)
        accepted = await repo.add(make_invitation(status=InvitationStatus.ACCEPTED))

        # Act
        response = await use_case.execute(
            ManageInvitationRequest(token=accepted.token.root, action=ManageAction.CANCEL)
        )

        # Assert
        assert response.success is False
        assert response.error == ErrorKind.ALREADY_ACCEPTED

    @pytest.mark.asyncio
    async def test_extend_expired_is_rejected(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        use_case = await unit_env.get(ManageInvitationUseCase)
        expired = await repo.add(make_invitation(status=InvitationStatus.EXPIRED))

        # Act
        response = await use_case.execute(
            ManageInvitationRequest(
                token=expired.token.root, action=ManageAction.EXTEND, days=3
            )
        )

        # Assert
        assert response.error == ErrorKind.EXPIRED
        assert response.details == {"expired_now": False}

    @pytest.mark.asyncio
    async def test_extend_lapsed_pending(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        use_case = await unit_env.get(ManageInvitationUseCase)
        lapsed = await repo.add(make_invitation(expires_in=-timedelta(hours=1)))

        # Act
        before = datetime.now(timezone.utc)
        response = await use_case.execute(
            ManageInvitationRequest(
                token=lapsed.token.root, action=ManageAction.EXTEND, days=10
            )
        )

        # Assert
        assert response.success is True
        assert response.invitation.status == InvitationStatus.PENDING
        assert response.invitation.expires_at >= before + timedelta(days=10)

    @pytest.mark.asyncio
    async def test_extend_beyond_calendar_range(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        use_case = await unit_env.get(ManageInvitationUseCase)
        invitation = await repo.add(make_invitation())

        # Act
        response = await use_case.execute(
            ManageInvitationRequest(
                token=invitation.token.root, action=ManageAction.EXTEND, days=10_000_000
            )
        )

        # Assert
        assert response.success is False
        assert response.error == ErrorKind.VALIDATION_ERROR


class TestDeleteInvitationUseCase:
    """Tests for DeleteInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        use_case = await unit_env.get(DeleteInvitationUseCase)
        invitation = await repo.add(make_invitation())

        # Act
        response = await use_case.execute(
            DeleteInvitationRequest(token=invitation.token.root)
        )

        # Assert
        assert response.success is True
        assert response.token == invitation.token.root
        assert await repo.find_by_token(invitation.token) is None

    @pytest.mark.asyncio
    async def test_delete_accepted_is_conflict(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        use_case = await unit_env.get(DeleteInvitationUseCase)
        accepted = await repo.add(make_invitation(status=InvitationStatus.ACCEPTED))

        # Act
        response = await use_case.execute(
            DeleteInvitationRequest(token=accepted.token.root)
        )

        # Assert
        assert response.error == ErrorKind.CONFLICT
