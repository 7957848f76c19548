"""Repository implementations."""

from .sqlalchemy_application_repository import SQLAlchemyApplicationRepository
from .sqlalchemy_history_repository import SQLAlchemyHistoryRepository
from .sqlalchemy_document_repository import SQLAlchemyDocumentRepository

__all__ = [
    "SQLAlchemyApplicationRepository",
    "SQLAlchemyHistoryRepository",
    "SQLAlchemyDocumentRepository",
]
