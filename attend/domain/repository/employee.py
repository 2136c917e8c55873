"""Employee repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from attend.domain.model.employee import Employee
from attend.domain.value import EmployeeId, TelegramId


class EmployeeRepository(ABC):
    """Repository for the Employee entity, as far as invitations need it."""

    @abstractmethod
    async def find_by_id(self, employee_id: EmployeeId) -> Optional[Employee]:
        """Find an employee by ID.

        Args:
            employee_id: The employee's unique identifier

        Returns:
            The employee if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_telegram_id(self, telegram_id: TelegramId) -> Optional[Employee]:
        """Find an employee by Telegram identity.

        Args:
            telegram_id: The employee's Telegram user ID

        Returns:
            The employee if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, employee: Employee) -> Employee:
        """Insert a new employee.

        Args:
            employee: The employee to insert

        Returns:
            The saved employee

        Raises:
            IntegrityError: If an employee with this Telegram ID already exists
        """
        pass
