"""Use cases - One class per user-facing operation."""

from .get_application import GetApplicationUseCase
from .list_applications import ListApplicationsUseCase
from .update_application_form import UpdateApplicationFormUseCase
from .register_document import RegisterDocumentUseCase, DEFAULT_ALLOWED_EXTENSIONS
from .list_documents import ListDocumentsUseCase

__all__ = [
    "GetApplicationUseCase",
    "ListApplicationsUseCase",
    "UpdateApplicationFormUseCase",
    "RegisterDocumentUseCase",
    "ListDocumentsUseCase",
    "DEFAULT_ALLOWED_EXTENSIONS",
]
