"""SQLAlchemy ORM models."""

from .application_model import ApplicationModel, ApplicationHistoryModel
from .document_model import DocumentModel

__all__ = ["ApplicationModel", "ApplicationHistoryModel", "DocumentModel"]
