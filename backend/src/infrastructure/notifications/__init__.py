"""Outbound notifications."""

from .smtp_client import send_email
from .smtp_notification_service import SMTPNotificationService

__all__ = ["send_email", "SMTPNotificationService"]
