"""History repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import HistoryEntry


class IHistoryRepository(ABC):
    """
    Abstract repository interface for the append-only application history.
    
    There is deliberately no update or delete operation.
    """
    
    @abstractmethod
    async def append(self, entry: HistoryEntry) -> HistoryEntry:
        """
        Append an entry to the audit trail.
        
        Args:
            entry: HistoryEntry to store
            
        Returns:
            Stored HistoryEntry with its assigned id
        """
        pass
    
    @abstractmethod
    async def list_for_application(self, application_id: int) -> list[HistoryEntry]:
        """
        Retrieve the audit trail of an application.
        
        Args:
            application_id: Application id
            
        Returns:
            Entries ordered by created_at ascending, ties broken by id
        """
        pass
    
    @abstractmethod
    async def get_latest(self, application_id: int) -> Optional[HistoryEntry]:
        """
        Retrieve the most recent entry of an application.
        
        Args:
            application_id: Application id
            
        Returns:
            Latest HistoryEntry if any, None otherwise
        """
        pass
    
    @abstractmethod
    async def count_for_application(self, application_id: int) -> int:
        """Count the entries recorded for an application."""
        pass
