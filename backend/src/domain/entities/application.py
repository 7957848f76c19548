"""Application entity representing a single applicant's submission."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from domain.clock import utc_now
from domain.enums import ApplicationStatus
from domain.value_objects import FormData


@dataclass
class Application:
    """
    Entity representing an admissions application.

    The owner is fixed at creation. The status only changes through the
    lifecycle manager; the form payload is opaque to it.
    """

    owner_id: int
    status: ApplicationStatus = ApplicationStatus.DRAFT
    form_data: FormData = field(default_factory=FormData)
    id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def is_owned_by(self, user_id: int) -> bool:
        """Check if the application belongs to the given user."""
        return self.owner_id == user_id

    def is_editable_by_owner(self) -> bool:
        """Owners may only edit the form while it is still a draft."""
        return self.status == ApplicationStatus.DRAFT

    def change_status(
        self,
        status: ApplicationStatus,
        at: Optional[datetime] = None,
    ) -> None:
        """
        Set a new status.

        Policy checks are the caller's responsibility.

        Args:
            status: New status
            at: Timestamp of the change, defaults to now
        """
        self.status = status
        self._mark_updated(at)

    def replace_form_data(self, form_data: FormData) -> None:
        """Replace the whole form payload."""
        self.form_data = form_data
        self._mark_updated()

    def _mark_updated(self, at: Optional[datetime] = None) -> None:
        """Mark the entity as updated."""
        self.updated_at = at or utc_now()

    def to_dict(self) -> dict[str, Any]:
        """Convert application to its wire representation."""
        return {
            "id": self.id,
            "user_id": self.owner_id,
            "status": self.status.value,
            "form_data": self.form_data.to_dict(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    def __str__(self) -> str:
        return f"Application(id={self.id}, owner={self.owner_id}, status={self.status.value})"
