"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """All-or-nothing scope spanning several repository writes."""

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block.

        Writes made inside the block are discarded if the block raises.

        Usage:
            async with transaction_manager.atomic():
                await employee_repository.add(employee)
                await invitation_repository.update_if_status(...)
        """
        pass
