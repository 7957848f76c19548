"""Pydantic schemas for request/response validation."""

from .application_schemas import (
    ApplicationCreateRequest,
    ApplicationUpdateRequest,
    StatusUpdateRequest,
    NoteCreateRequest,
    ApplicationResponse,
    HistoryEntryResponse,
)
from .document_schemas import DocumentCreateRequest, DocumentResponse
from .common_schemas import HealthResponse, ErrorResponse

__all__ = [
    "ApplicationCreateRequest",
    "ApplicationUpdateRequest",
    "StatusUpdateRequest",
    "NoteCreateRequest",
    "ApplicationResponse",
    "HistoryEntryResponse",
    "DocumentCreateRequest",
    "DocumentResponse",
    "HealthResponse",
    "ErrorResponse",
]
