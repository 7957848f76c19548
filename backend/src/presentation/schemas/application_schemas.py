"""Application-related Pydantic schemas."""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field

from domain.entities import Application, HistoryEntry


class ApplicationCreateRequest(BaseModel):
    """Request schema for creating an application."""
    
    form_data: dict[str, Any] = Field(
        default_factory=dict,
        description="Initial multi-section form payload, may be empty"
    )
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "form_data": {
                        "personalInfo": {"firstName": "Ada", "lastName": "Lovelace"}
                    }
                }
            ]
        }
    }


class ApplicationUpdateRequest(BaseModel):
    """Request schema for replacing the form payload."""
    
    form_data: dict[str, Any] = Field(..., description="New form payload")


class StatusUpdateRequest(BaseModel):
    """Request schema for a status change."""
    
    status: str = Field(
        ...,
        description="Requested status: submitted, review, accepted or rejected",
        min_length=1,
        max_length=20
    )
    notes: Optional[str] = Field(
        None,
        description="Optional reviewer comment",
        max_length=5000
    )
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "accepted", "notes": "Congrats"}
            ]
        }
    }


class NoteCreateRequest(BaseModel):
    """Request schema for a reviewer note."""
    
    notes: str = Field(..., description="Note text", max_length=5000)
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"notes": "Needs transcript"}
            ]
        }
    }


class ApplicationResponse(BaseModel):
    """Response schema for an application."""
    
    id: int
    user_id: int = Field(..., description="Owner of the application")
    status: str
    form_data: dict[str, Any]
    created_at: datetime
    updated_at: datetime
    
    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        return cls(
            id=application.id,
            user_id=application.owner_id,
            status=application.status.value,
            form_data=application.form_data.to_dict(),
            created_at=application.created_at,
            updated_at=application.updated_at,
        )


class HistoryEntryResponse(BaseModel):
    """Response schema for one audit trail entry."""
    
    id: int
    application_id: int
    status: Optional[str] = Field(None, description="Null for note-only entries")
    notes: Optional[str] = None
    created_by: int = Field(..., description="User who caused the entry")
    created_at: datetime
    
    @classmethod
    def from_entity(cls, entry: HistoryEntry) -> "HistoryEntryResponse":
        return cls(
            id=entry.id,
            application_id=entry.application_id,
            status=entry.status.value if entry.status else None,
            notes=entry.notes,
            created_by=entry.actor_id,
            created_at=entry.created_at,
        )
