"""Use case for recording an uploaded document against an application."""

from collections.abc import Iterable

from application.interfaces import IUnitOfWork
from application.use_cases.access import load_accessible_application
from domain.entities import Document
from domain.exceptions import ValidationError
from domain.value_objects import Actor
from infrastructure.config import get_logger


DEFAULT_ALLOWED_EXTENSIONS = ("pdf", "jpg", "jpeg", "png", "doc", "docx")


class RegisterDocumentUseCase:
    """
    Store metadata of a file the client already put in the blob store.
    
    The file itself is never read; only its name and locator are kept.
    """
    
    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        allowed_extensions: Iterable[str] = DEFAULT_ALLOWED_EXTENSIONS,
    ):
        self.uow = unit_of_work
        self.allowed_extensions = frozenset(ext.lower().lstrip(".") for ext in allowed_extensions)
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(
        self,
        application_id: int,
        actor: Actor,
        file_name: str,
        storage_path: str,
    ) -> Document:
        """
        Register a document.
        
        Raises:
            NotFoundError: If the application does not exist
            ForbiddenError: If the actor is neither owner nor admin
            ValidationError: If the metadata is blank or the type not allowed
        """
        async with self.uow:
            await load_accessible_application(self.uow, application_id, actor)
            document = Document(
                application_id=application_id,
                file_name=file_name.strip(),
                storage_path=storage_path.strip(),
            )
            if document.extension not in self.allowed_extensions:
                allowed = ", ".join(sorted(self.allowed_extensions))
                raise ValidationError(
                    f"Invalid file type '{document.extension or 'none'}'. Allowed: {allowed}",
                    context={"application_id": application_id, "file_name": document.file_name},
                )
            document = await self.uow.documents.create(document)
        
        self.logger.info(f"Document {document.id} registered on application {application_id}")
        return document
