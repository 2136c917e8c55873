"""PostgreSQL transaction manager."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from attend.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Atomic blocks as SAVEPOINTs inside the request's session transaction.

    The outer transaction is still committed or rolled back once per request
    by the session provider; a failing block only undoes its own writes.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
