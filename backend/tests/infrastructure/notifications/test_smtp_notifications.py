"""Tests for the SMTP notification path."""

import smtplib
from datetime import datetime

import pytest
from domain.entities import Application, HistoryEntry
from domain.enums import ApplicationStatus
from infrastructure.config import Settings
from infrastructure.notifications import SMTPNotificationService, send_email
from infrastructure.notifications.smtp_client import resolve_recipients


def make_settings(**overrides):
    values = {
        "smtp_server": "smtp.example.edu",
        "smtp_port": 587,
        "smtp_email": "portal@example.edu",
        "smtp_password": "secret",
        "smtp_recipient_emails": "admissions@example.edu, dean@example.edu",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeSMTP:
    """Stand-in for smtplib.SMTP recording the sent messages."""

    sent = []

    def __init__(self, host, port):
        self.host = host
        self.port = port

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def ehlo(self):
        pass

    def starttls(self):
        pass

    def login(self, user, password):
        pass

    def send_message(self, msg, to_addrs=None):
        FakeSMTP.sent.append((msg, to_addrs))


class TestResolveRecipients:
    """Test recipient selection."""

    def test_explicit_recipient_wins(self):
        assert resolve_recipients(make_settings(), "one@example.edu") == ["one@example.edu"]

    def test_configured_list_is_split_and_trimmed(self):
        assert resolve_recipients(make_settings()) == [
            "admissions@example.edu",
            "dean@example.edu",
        ]

    def test_falls_back_to_sender(self):
        settings = make_settings(smtp_recipient_emails="")
        assert resolve_recipients(settings) == ["portal@example.edu"]


class TestSendEmail:
    """Test send_email outcomes."""

    def test_unconfigured_smtp_is_skipped(self):
        settings = make_settings(smtp_server=None)
        assert send_email("Subject", "Body", settings=settings) is False

    def test_sends_to_configured_recipients(self, monkeypatch):
        FakeSMTP.sent = []
        monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)

        assert send_email("Hello", "World", settings=make_settings()) is True

        msg, to_addrs = FakeSMTP.sent[0]
        assert msg["Subject"] == "Hello"
        assert to_addrs == ["admissions@example.edu", "dean@example.edu"]

    def test_connection_failure_returns_false(self, monkeypatch):
        def refuse(host, port):
            raise ConnectionRefusedError("no server")

        monkeypatch.setattr(smtplib, "SMTP", refuse)

        assert send_email("Hello", "World", settings=make_settings()) is False

    def test_non_ascii_password_returns_false(self, monkeypatch):
        """Test that credential encoding errors are reported, not raised."""

        class AsciiOnlySMTP(FakeSMTP):
            def login(self, user, password):
                password.encode("ascii")

        monkeypatch.setattr(smtplib, "SMTP", AsciiOnlySMTP)

        settings = make_settings(smtp_password="şifre123")
        assert send_email("Hello", "World", settings=settings) is False


class TestSMTPNotificationService:
    """Test status change emails."""

    @pytest.fixture
    def accepted(self):
        application = Application(
            owner_id=42, status=ApplicationStatus.ACCEPTED, id=12
        )
        entry = HistoryEntry(
            application_id=12,
            actor_id=7,
            status=ApplicationStatus.ACCEPTED,
            notes="Congrats",
            created_at=datetime(2030, 3, 1, 10, 0, 0),
        )
        return application, entry

    def test_render(self, accepted):
        subject, body = SMTPNotificationService.render(*accepted)
        assert subject == "Application #12 is now accepted"
        assert "Applicant: user #42" in body
        assert "Changed by: user #7" in body
        assert "Notes: Congrats" in body

    @pytest.mark.asyncio
    async def test_status_changed_without_smtp_returns_false(self, accepted):
        service = SMTPNotificationService(make_settings(smtp_password=None))
        assert await service.status_changed(*accepted) is False
