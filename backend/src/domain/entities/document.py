"""Document entity referencing a file held by the blob store."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePosixPath
from typing import Optional

from domain.clock import utc_now
from domain.exceptions import ValidationError


@dataclass
class Document:
    """
    Metadata of an uploaded document.

    The bytes live in the external blob store; only the locator is kept.
    """

    application_id: int
    file_name: str
    storage_path: str
    id: Optional[int] = None
    uploaded_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Validate document metadata."""
        if not self.file_name or not self.file_name.strip():
            raise ValidationError("Document file name cannot be empty")
        if not self.storage_path or not self.storage_path.strip():
            raise ValidationError("Document storage path cannot be empty")

    @property
    def extension(self) -> str:
        """Lower-cased file extension without the dot."""
        return PurePosixPath(self.file_name).suffix.lstrip(".").lower()

    def __str__(self) -> str:
        return f"Document(id={self.id}, file={self.file_name})"
