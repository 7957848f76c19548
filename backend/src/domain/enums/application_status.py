"""Lifecycle statuses of an admissions application."""

from enum import Enum

from domain.exceptions import ValidationError


class ApplicationStatus(str, Enum):
    """Status vocabulary, wire-exact."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    REVIEW = "review"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Accepted and rejected are the expected end of the lifecycle."""
        return self in (ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED)

    @classmethod
    def parse(cls, value: "str | ApplicationStatus") -> "ApplicationStatus":
        """
        Convert a raw status string to an ApplicationStatus.

        Raises:
            ValidationError: If the value is not part of the vocabulary
        """
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(status.value for status in cls)
            raise ValidationError(
                f"Unknown status '{value}'. Expected one of: {allowed}"
            ) from None

    def __str__(self) -> str:
        return self.value
