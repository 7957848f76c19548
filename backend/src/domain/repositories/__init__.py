"""Domain Repository Interfaces - Abstract definitions."""

from .application_repository import IApplicationRepository
from .history_repository import IHistoryRepository
from .document_repository import IDocumentRepository

__all__ = ["IApplicationRepository", "IHistoryRepository", "IDocumentRepository"]
