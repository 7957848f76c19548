"""Document repository interface - Abstract definition."""

from abc import ABC, abstractmethod

from domain.entities import Document


class IDocumentRepository(ABC):
    """Abstract repository interface for document metadata."""
    
    @abstractmethod
    async def create(self, document: Document) -> Document:
        """
        Store metadata of an uploaded document.
        
        Args:
            document: Document entity to create
            
        Returns:
            Created Document with its assigned id
        """
        pass
    
    @abstractmethod
    async def list_for_application(self, application_id: int) -> list[Document]:
        """
        Retrieve the documents of an application.
        
        Args:
            application_id: Application id
            
        Returns:
            Documents ordered by upload time
        """
        pass
