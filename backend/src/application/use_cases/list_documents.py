"""Use case for listing the documents of an application."""

from application.interfaces import IUnitOfWork
from application.use_cases.access import load_accessible_application
from domain.entities import Document
from domain.value_objects import Actor


class ListDocumentsUseCase:
    """List document references for the owner or an admin."""
    
    def __init__(self, unit_of_work: IUnitOfWork):
        self.uow = unit_of_work
    
    async def execute(self, application_id: int, actor: Actor) -> list[Document]:
        async with self.uow:
            await load_accessible_application(self.uow, application_id, actor)
            return await self.uow.documents.list_for_application(application_id)
