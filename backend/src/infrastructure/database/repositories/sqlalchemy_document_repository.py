"""SQLAlchemy implementation of document repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Document
from domain.repositories import IDocumentRepository
from infrastructure.database.models import DocumentModel


class SQLAlchemyDocumentRepository(IDocumentRepository):
    """Concrete implementation of IDocumentRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, document: Document) -> Document:
        """Store document metadata."""
        model = DocumentModel(
            application_id=document.application_id,
            file_name=document.file_name,
            storage_path=document.storage_path,
            uploaded_at=document.uploaded_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def list_for_application(self, application_id: int) -> list[Document]:
        """Retrieve documents of an application."""
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.application_id == application_id)
            .order_by(DocumentModel.uploaded_at, DocumentModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    def _model_to_entity(self, model: DocumentModel) -> Document:
        """Convert ORM model to domain entity."""
        return Document(
            id=model.id,
            application_id=model.application_id,
            file_name=model.file_name,
            storage_path=model.storage_path,
            uploaded_at=model.uploaded_at,
        )
