"""Notification service interface for dependency inversion."""

from abc import ABC, abstractmethod

from domain.entities import Application, HistoryEntry


class INotificationService(ABC):
    """
    Abstract interface for lifecycle notifications.
    
    Notifications are best effort: implementations report failure through
    their return value and never raise into the lifecycle.
    """
    
    @abstractmethod
    async def status_changed(self, application: Application, entry: HistoryEntry) -> bool:
        """
        Announce a committed status change.
        
        Args:
            application: Application after the change
            entry: History entry recorded for the change
            
        Returns:
            True if the notification went out, False otherwise
        """
        pass
