"""Domain errors raised by entities, policies and use cases."""

from typing import Any, Optional


class DomainError(Exception):
    """
    Base class for every error the admissions domain raises on purpose.

    Attributes:
        message: Human readable description
        code: Stable machine readable identifier
        context: Optional extra data for logging
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ValidationError(DomainError, ValueError):
    """Malformed input: empty notes, bad form payload, unknown status."""

    code = "VALIDATION_ERROR"


class NotFoundError(DomainError):
    """Referenced record does not exist."""

    code = "NOT_FOUND"


class ForbiddenError(DomainError):
    """Actor lacks the authority for the requested operation."""

    code = "FORBIDDEN"


class InvalidTransitionError(DomainError):
    """Requested status change is not allowed by the transition policy."""

    code = "INVALID_TRANSITION"
