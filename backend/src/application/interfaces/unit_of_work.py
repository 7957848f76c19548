"""Unit of work interface - transactional boundary for use cases."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional

from domain.repositories import (
    IApplicationRepository,
    IDocumentRepository,
    IHistoryRepository,
)


class IUnitOfWork(ABC):
    """
    Abstract unit of work bundling the repositories of one transaction.
    
    Used as an async context manager: everything written inside the block
    is committed together when it exits normally, and rolled back when it
    exits with an exception or when the commit itself fails. The exception
    is never suppressed.
    
    Example:
        async with uow:
            await uow.applications.update(application)
            await uow.history.append(entry)
    """
    
    applications: IApplicationRepository
    history: IHistoryRepository
    documents: IDocumentRepository
    
    async def __aenter__(self) -> "IUnitOfWork":
        return self
    
    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is not None:
            await self.rollback()
            return
        try:
            await self.commit()
        except Exception:
            await self.rollback()
            raise
    
    @abstractmethod
    async def commit(self) -> None:
        """Persist all pending changes."""
        pass
    
    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending changes."""
        pass
