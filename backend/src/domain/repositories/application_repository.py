"""Application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Application


class IApplicationRepository(ABC):
    """
    Abstract repository interface for Application entity.
    
    This interface defines the contract for application persistence.
    Concrete implementations will be in the infrastructure layer.
    """
    
    @abstractmethod
    async def create(self, application: Application) -> Application:
        """
        Create a new application.
        
        Args:
            application: Application entity to create
            
        Returns:
            Created Application with its assigned id
        """
        pass
    
    @abstractmethod
    async def get_by_id(
        self,
        application_id: int,
        for_update: bool = False,
    ) -> Optional[Application]:
        """
        Retrieve an application by ID.
        
        Args:
            application_id: Application id
            for_update: Lock the row for the rest of the transaction
            
        Returns:
            Application if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def list_all(self) -> list[Application]:
        """Retrieve every application, oldest first."""
        pass
    
    @abstractmethod
    async def list_by_owner(self, owner_id: int) -> list[Application]:
        """
        Retrieve the applications of one user, oldest first.
        
        Args:
            owner_id: Owner user id
            
        Returns:
            List of the owner's applications
        """
        pass
    
    @abstractmethod
    async def update(self, application: Application) -> Application:
        """
        Update an existing application.
        
        Args:
            application: Application entity with updated data
            
        Returns:
            Updated Application
        """
        pass
