"""PostgreSQL implementation of Employee repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from attend.domain.model import Employee
from attend.domain.repository import EmployeeRepository
from attend.domain.value import EmployeeId, TelegramId
from attend.persistence.mappers import employee_to_dict, row_to_employee
from attend.persistence.tables import employees_table


class PostgresEmployeeRepository(EmployeeRepository):
    """PostgreSQL implementation of EmployeeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, employee_id: EmployeeId) -> Optional[Employee]:
        """Find an employee by ID."""
        stmt = select(employees_table).where(employees_table.c.id == employee_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_employee(dict(row)) if row else None

    async def find_by_telegram_id(self, telegram_id: TelegramId) -> Optional[Employee]:
        """Find an employee by Telegram identity."""
        stmt = select(employees_table).where(
            employees_table.c.telegram_id == telegram_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_employee(dict(row)) if row else None

    async def add(self, employee: Employee) -> Employee:
        """Insert a new employee.

        Raises:
            IntegrityError: If an employee with this Telegram ID already exists
        """
        stmt = insert(employees_table).values(**employee_to_dict(employee))
        await self.session.execute(stmt)
        await self.session.flush()
        return employee
