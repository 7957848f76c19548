"""SQLAlchemy implementation of the append-only history repository."""

from typing import Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import HistoryEntry
from domain.enums import ApplicationStatus
from domain.repositories import IHistoryRepository
from infrastructure.database.models import ApplicationHistoryModel


class SQLAlchemyHistoryRepository(IHistoryRepository):
    """Concrete implementation of IHistoryRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def append(self, entry: HistoryEntry) -> HistoryEntry:
        """Insert a history row."""
        model = ApplicationHistoryModel(
            application_id=entry.application_id,
            status=entry.status.value if entry.status else None,
            notes=entry.notes,
            created_by=entry.actor_id,
            created_at=entry.created_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def list_for_application(self, application_id: int) -> list[HistoryEntry]:
        """Retrieve the audit trail, oldest first."""
        stmt = (
            select(ApplicationHistoryModel)
            .where(ApplicationHistoryModel.application_id == application_id)
            .order_by(ApplicationHistoryModel.created_at, ApplicationHistoryModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    async def get_latest(self, application_id: int) -> Optional[HistoryEntry]:
        """Retrieve the most recent entry."""
        stmt = (
            select(ApplicationHistoryModel)
            .where(ApplicationHistoryModel.application_id == application_id)
            .order_by(
                ApplicationHistoryModel.created_at.desc(),
                ApplicationHistoryModel.id.desc(),
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def count_for_application(self, application_id: int) -> int:
        """Count entries of an application."""
        stmt = (
            select(func.count())
            .select_from(ApplicationHistoryModel)
            .where(ApplicationHistoryModel.application_id == application_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
    
    def _model_to_entity(self, model: ApplicationHistoryModel) -> HistoryEntry:
        """Convert ORM model to domain entity."""
        return HistoryEntry(
            id=model.id,
            application_id=model.application_id,
            actor_id=model.created_by,
            status=ApplicationStatus(model.status) if model.status else None,
            notes=model.notes,
            created_at=model.created_at,
        )
