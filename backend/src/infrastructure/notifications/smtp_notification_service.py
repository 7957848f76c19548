"""Email notifications for application status changes."""

import asyncio
from typing import Optional

from application.interfaces import INotificationService
from domain.entities import Application, HistoryEntry
from infrastructure.config import Settings, get_settings
from infrastructure.notifications.smtp_client import send_email


class SMTPNotificationService(INotificationService):
    """Notify the admissions office mailbox when an application changes status."""
    
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
    
    async def status_changed(self, application: Application, entry: HistoryEntry) -> bool:
        subject, body = self.render(application, entry)
        # smtplib blocks, keep it off the event loop
        return await asyncio.to_thread(send_email, subject, body, None, self.settings)
    
    @staticmethod
    def render(application: Application, entry: HistoryEntry) -> tuple[str, str]:
        """Build the subject and body of a status change email."""
        status = entry.status.value if entry.status else application.status.value
        subject = f"Application #{application.id} is now {status}"
        lines = [
            f"Application #{application.id} changed status to '{status}'.",
            f"Applicant: user #{application.owner_id}",
            f"Changed by: user #{entry.actor_id}",
            f"At: {entry.created_at.isoformat()} UTC",
        ]
        if entry.notes:
            lines.append("")
            lines.append(f"Notes: {entry.notes}")
        return subject, "\n".join(lines)
