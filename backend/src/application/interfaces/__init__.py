"""Application interfaces - Port definitions for external services."""

from .unit_of_work import IUnitOfWork
from .notification_service import INotificationService

__all__ = ["IUnitOfWork", "INotificationService"]
