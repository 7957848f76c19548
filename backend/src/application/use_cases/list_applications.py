"""Use case for listing the applications visible to an actor."""

from application.interfaces import IUnitOfWork
from domain.entities import Application
from domain.value_objects import Actor
from infrastructure.config import get_logger


class ListApplicationsUseCase:
    """Admins see every application, applicants only their own."""
    
    def __init__(self, unit_of_work: IUnitOfWork):
        self.uow = unit_of_work
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, actor: Actor) -> list[Application]:
        async with self.uow:
            if actor.is_admin:
                applications = await self.uow.applications.list_all()
            else:
                applications = await self.uow.applications.list_by_owner(actor.user_id)
        
        self.logger.debug(f"Listed {len(applications)} applications for {actor}")
        return applications
