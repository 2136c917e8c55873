"""Tests for create invitation use case."""

import pytest

from attend.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
)
from attend.config import InvitationSettings
from attend.domain.error import ErrorKind
from attend.domain.value import InvitationStatus
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateInvitationUseCase:
    """Tests for CreateInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_create_returns_deep_link(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateInvitationUseCase)
        settings = await unit_env.get(InvitationSettings)

        # Act
        response = await use_case.execute(
            CreateInvitationRequest(
                invited_by="admin-1", first_name="Ahmed", department="Engineering"
            )
        )

        # Assert
        assert response.success is True
        assert response.error is None
        invitation = response.invitation
        assert invitation.status == InvitationStatus.PENDING
        assert invitation.first_name == "Ahmed"
        assert invitation.invitation_link == (
            f"{settings.bot_entrypoint}?start=invite_{invitation.token}"
        )

    @pytest.mark.asyncio
    async def test_blank_first_name_is_validation_error(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateInvitationUseCase)

        # Act
        response = await use_case.execute(
            CreateInvitationRequest(invited_by="admin-1", first_name="   ")
        )

        # Assert
        assert response.success is False
        assert response.error == ErrorKind.VALIDATION_ERROR
        assert response.details == {"fields": ["first_name"]}
        assert response.invitation is None

    @pytest.mark.asyncio
    async def test_non_positive_expiry_is_validation_error(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateInvitationUseCase)

        # Act
        response = await use_case.execute(
            CreateInvitationRequest(
                invited_by="admin-1", first_name="Ahmed", expires_in_days=0
            )
        )

        # Assert
        assert response.success is False
        assert response.error == ErrorKind.VALIDATION_ERROR

    @pytest.mark.asyncio
    async def test_expiry_beyond_calendar_range_is_validation_error(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateInvitationUseCase)

        # Act
        response = await use_case.execute(
            CreateInvitationRequest(
                invited_by="admin-1", first_name="Ahmed", expires_in_days=10_000_000
            )
        )

        # Assert
        assert response.success is False
        assert response.error == ErrorKind.VALIDATION_ERROR
        assert response.invitation is None
