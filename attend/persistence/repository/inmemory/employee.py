"""In-memory employee repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from attend.domain.model.employee import Employee
from attend.domain.repository.employee import EmployeeRepository
from attend.domain.value import EmployeeId, TelegramId


class InMemoryEmployeeRepository(EmployeeRepository):
    """In-memory implementation of EmployeeRepository for testing."""

    def __init__(self) -> None:
        self._employees: dict[EmployeeId, Employee] = {}

    def snapshot(self) -> dict[EmployeeId, Employee]:
        """Copy of the current state, for rolling back an atomic block."""
        return dict(self._employees)

    def restore(self, snapshot: dict[EmployeeId, Employee]) -> None:
        """Replace the current state with a snapshot."""
        self._employees = dict(snapshot)

    async def find_by_id(self, employee_id: EmployeeId) -> Optional[Employee]:
        """Find an employee by ID."""
        return self._employees.get(employee_id)

    async def find_by_telegram_id(self, telegram_id: TelegramId) -> Optional[Employee]:
        """Find an employee by Telegram identity."""
        for employee in self._employees.values():
            if employee.telegram_id == telegram_id:
                return employee
        return None

    async def add(self, employee: Employee) -> Employee:
        """Insert a new employee.

        Raises:
            IntegrityError: If an employee with this Telegram ID already exists
        """
        if employee.id in self._employees or await self.find_by_telegram_id(
            employee.telegram_id
        ):
            raise IntegrityError("Duplicate employee", None, Exception())

        self._employees[employee.id] = employee
        return employee
