"""SMTP Client for sending emails via standard library."""

import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional

from infrastructure.config import Settings, get_settings, get_logger

logger = get_logger(__name__)


def resolve_recipients(settings: Settings, recipient_email: Optional[str] = None) -> list[str]:
    """
    Work out who receives a message.
    
    Args:
        settings: Application settings
        recipient_email: Explicit recipient, overrides configuration
        
    Returns:
        List of recipient addresses, possibly empty
    """
    if recipient_email:
        return [recipient_email]
    if settings.smtp_recipient_emails:
        return [email.strip() for email in settings.smtp_recipient_emails.split(',') if email.strip()]
    if settings.smtp_email:
        # Fallback: send to self
        return [settings.smtp_email]
    return []


def send_email(
    subject: str,
    body: str,
    recipient_email: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> bool:
    """
    Send a plain text email using SMTP.
    
    Args:
        subject: The subject of the email.
        body: The content of the email (plain text).
        recipient_email: The address to send to. If None, the configured
            admissions office recipients are used.
        settings: Settings to use, defaults to the cached instance.
        
    Returns:
        bool: True if sent successfully, False otherwise.
    """
    settings = settings or get_settings()
    
    if not settings.smtp_configured:
        logger.warning("SMTP configuration missing. Skipping email.")
        return False
    
    recipients = resolve_recipients(settings, recipient_email)
    if not recipients:
        logger.warning("No recipient emails configured. Skipping email.")
        return False
        
    try:
        msg = MIMEMultipart()
        msg['From'] = settings.smtp_email
        msg['To'] = ', '.join(recipients)
        msg['Subject'] = subject
        msg.attach(MIMEText(body, 'plain', 'utf-8'))
        
        logger.info(f"Connecting to SMTP server: {settings.smtp_server}:{settings.smtp_port}...")
        
        with smtplib.SMTP(settings.smtp_server, settings.smtp_port) as server:
            server.ehlo()
            server.starttls()
            server.ehlo()
            server.login(settings.smtp_email, settings.smtp_password)
            server.send_message(msg, to_addrs=recipients)
        
        logger.info(f"Email sent successfully to {', '.join(recipients)}")
        return True
        
    except Exception as e:
        # Bad credentials encoding, refused connections and protocol errors alike
        logger.error(f"Failed to send email: {str(e)}")
        return False
