"""In-memory transaction manager for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol

from attend.domain.repository import TransactionManager


class Snapshotting(Protocol):
    def snapshot(self) -> Any: ...

    def restore(self, snapshot: Any) -> None: ...


class InMemoryTransactionManager(TransactionManager):
    """Serialises atomic blocks and restores repository state on failure."""

    def __init__(self, *repositories: Snapshotting) -> None:
        self._repositories = repositories
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self._lock:
            snapshots = [repository.snapshot() for repository in self._repositories]
            try:
                yield
            except BaseException:
                for repository, snapshot in zip(self._repositories, snapshots):
                    repository.restore(snapshot)
                raise
