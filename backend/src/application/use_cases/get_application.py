"""Use case for fetching a single application."""

from application.interfaces import IUnitOfWork
from application.use_cases.access import load_accessible_application
from domain.entities import Application
from domain.value_objects import Actor


class GetApplicationUseCase:
    """Fetch the current state of an application for its owner or an admin."""
    
    def __init__(self, unit_of_work: IUnitOfWork):
        self.uow = unit_of_work
    
    async def execute(self, application_id: int, actor: Actor) -> Application:
        async with self.uow:
            return await load_accessible_application(self.uow, application_id, actor)
