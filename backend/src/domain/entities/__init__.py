"""Domain Entities - Objects with identity."""

from .application import Application
from .history_entry import HistoryEntry
from .document import Document

__all__ = ["Application", "HistoryEntry", "Document"]
