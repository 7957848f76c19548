"""Document-related Pydantic schemas."""

from datetime import datetime
from pydantic import BaseModel, Field

from domain.entities import Document


class DocumentCreateRequest(BaseModel):
    """Request schema for registering an uploaded document."""
    
    file_name: str = Field(..., description="Original file name", max_length=255)
    storage_path: str = Field(
        ...,
        description="Locator of the file in the blob store",
        max_length=1024
    )
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "file_name": "transcript.pdf",
                    "storage_path": "application-documents/12/5f1c-transcript.pdf"
                }
            ]
        }
    }


class DocumentResponse(BaseModel):
    """Response schema for document metadata."""
    
    id: int
    application_id: int
    file_name: str
    storage_path: str
    uploaded_at: datetime
    
    @classmethod
    def from_entity(cls, document: Document) -> "DocumentResponse":
        return cls(
            id=document.id,
            application_id=document.application_id,
            file_name=document.file_name,
            storage_path=document.storage_path,
            uploaded_at=document.uploaded_at,
        )
