"""Tests for the in-memory transaction manager."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from attend.domain.model import Employee
from attend.domain.value import EmployeeId, InvitationStatus, TelegramId
from attend.persistence.repository.inmemory import (
    InMemoryEmployeeRepository,
    InMemoryInvitationRepository,
    InMemoryTransactionManager,
)
from tests.factories import make_invitation


def make_employee(telegram_id: str = "123456") -> Employee:
    return Employee(
        id=EmployeeId(uuid4()),
        telegram_id=TelegramId(telegram_id),
        first_name="Ahmed",
        registered_at=datetime.now(timezone.utc),
    )


class TestInMemoryTransactionManager:
    """Tests for InMemoryTransactionManager."""

    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self):
        # Arrange
        invitations = InMemoryInvitationRepository()
        employees = InMemoryEmployeeRepository()
        tx = InMemoryTransactionManager(invitations, employees)
        employee = make_employee()

        # Act
        async with tx.atomic():
            await employees.add(employee)
            await invitations.add(make_invitation())

        # Assert
        assert await employees.find_by_id(employee.id) == employee
        assert await invitations.count() == 1

    @pytest.mark.asyncio
    async def test_failure_restores_every_repository(self):
        # Arrange
        invitations = InMemoryInvitationRepository()
        employees = InMemoryEmployeeRepository()
        tx = InMemoryTransactionManager(invitations, employees)
        invitation = await invitations.add(make_invitation())
        employee = make_employee()

        # Act
        with pytest.raises(RuntimeError):
            async with tx.atomic():
                await employees.add(employee)
                await invitations.update_if_status(
                    invitation.evolve(
                        status=InvitationStatus.ACCEPTED,
                        employee_id=employee.id,
                        accepted_at=employee.registered_at,
                    ),
                    allowed={InvitationStatus.PENDING},
                )
                raise RuntimeError("boom")

        # Assert
        assert await employees.find_by_id(employee.id) is None
        stored = await invitations.find_by_token(invitation.token)
        assert stored.status == InvitationStatus.PENDING


class TestInMemoryInvitationRepository:
    """Conditional update and delete semantics shared with the SQL store."""

    @pytest.mark.asyncio
    async def test_update_if_status_rejects_other_status(self):
        # Arrange
        repo = InMemoryInvitationRepository()
        cancelled = await repo.add(make_invitation(status=InvitationStatus.CANCELLED))

        # Act
        result = await repo.update_if_status(
            cancelled.evolve(status=InvitationStatus.EXPIRED),
            allowed={InvitationStatus.PENDING},
        )

        # Assert
        assert result is None
        assert (await repo.find_by_id(cancelled.id)).status == InvitationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_delete_skips_accepted(self):
        # Arrange
        repo = InMemoryInvitationRepository()
        pending = await repo.add(make_invitation())
        accepted = await repo.add(make_invitation(status=InvitationStatus.ACCEPTED))

        # Act
        deleted = await repo.delete_by_tokens([pending.token, accepted.token])

        # Assert
        assert deleted == 1
        assert await repo.find_by_token(accepted.token) is not None
