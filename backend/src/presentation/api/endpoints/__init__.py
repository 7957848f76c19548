"""API endpoint routers."""

from . import applications, documents, health

__all__ = ["applications", "documents", "health"]
