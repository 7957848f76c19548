"""SQLAlchemy implementation of application repository."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Application
from domain.enums import ApplicationStatus
from domain.exceptions import NotFoundError
from domain.repositories import IApplicationRepository
from domain.value_objects import FormData
from infrastructure.database.models import ApplicationModel


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """Concrete implementation of IApplicationRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, application: Application) -> Application:
        """Create a new application in the database."""
        model = self._entity_to_model(application)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(
        self,
        application_id: int,
        for_update: bool = False,
    ) -> Optional[Application]:
        """Retrieve an application by ID."""
        model = await self._get_model(application_id, for_update=for_update)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def list_all(self) -> list[Application]:
        """Retrieve every application."""
        stmt = select(ApplicationModel).order_by(
            ApplicationModel.created_at, ApplicationModel.id
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    async def list_by_owner(self, owner_id: int) -> list[Application]:
        """Retrieve the applications of one owner."""
        stmt = (
            select(ApplicationModel)
            .where(ApplicationModel.user_id == owner_id)
            .order_by(ApplicationModel.created_at, ApplicationModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    async def update(self, application: Application) -> Application:
        """Update an existing application."""
        model = await self._get_model(application.id)
        
        if model is None:
            raise NotFoundError(f"Application {application.id} not found")
        
        self._update_model_from_entity(model, application)
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    async def _get_model(
        self,
        application_id: int,
        for_update: bool = False,
    ) -> Optional[ApplicationModel]:
        stmt = select(ApplicationModel).where(ApplicationModel.id == application_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    def _entity_to_model(self, entity: Application) -> ApplicationModel:
        """Convert domain entity to ORM model."""
        return ApplicationModel(
            id=entity.id,
            user_id=entity.owner_id,
            status=entity.status.value,
            form_data=entity.form_data.to_dict(),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
    
    def _update_model_from_entity(
        self,
        model: ApplicationModel,
        entity: Application,
    ) -> None:
        """Update ORM model from domain entity. The owner is never rewritten."""
        model.status = entity.status.value
        model.form_data = entity.form_data.to_dict()
        model.updated_at = entity.updated_at
    
    def _model_to_entity(self, model: ApplicationModel) -> Application:
        """Convert ORM model to domain entity."""
        return Application(
            id=model.id,
            owner_id=model.user_id,
            status=ApplicationStatus(model.status),
            form_data=FormData(model.form_data or {}),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
