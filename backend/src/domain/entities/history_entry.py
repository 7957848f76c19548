"""History entry entity, one record of the application audit trail."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from domain.clock import utc_now
from domain.enums import ApplicationStatus
from domain.exceptions import ValidationError


@dataclass(frozen=True)
class HistoryEntry:
    """
    Immutable audit record of a status change or a reviewer note.

    Entries are appended once and never updated or removed. A note-only
    entry carries no status.

    Attributes:
        application_id: Owning application
        actor_id: User who caused the entry
        status: Status recorded at this point, None for note-only entries
        notes: Optional free text
        created_at: Ordering key of the audit trail
        id: Store-assigned identifier, None until persisted
    """

    application_id: int
    actor_id: int
    status: Optional[ApplicationStatus] = None
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    id: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate history entry."""
        if self.status is None and not (self.notes and self.notes.strip()):
            raise ValidationError("History entry needs a status or notes")

    @property
    def is_note(self) -> bool:
        """Check if entry is a note without a status change."""
        return self.status is None

    def to_dict(self) -> dict[str, Any]:
        """Convert entry to its wire representation."""
        return {
            "id": self.id,
            "application_id": self.application_id,
            "status": self.status.value if self.status else None,
            "notes": self.notes,
            "created_by": self.actor_id,
            "created_at": self.created_at.isoformat(),
        }

    def __str__(self) -> str:
        label = self.status.value if self.status else "note"
        return f"HistoryEntry(application={self.application_id}, {label}, by={self.actor_id})"
