"""Use case for editing the form payload of an application."""

from collections.abc import Mapping
from typing import Any

from application.interfaces import IUnitOfWork
from application.use_cases.access import load_accessible_application
from domain.entities import Application
from domain.exceptions import ForbiddenError
from domain.value_objects import Actor, FormData
from infrastructure.config import get_logger


class UpdateApplicationFormUseCase:
    """
    Replace the form payload of an application.
    
    Owners may edit only while the application is a draft; admins may edit
    at any time. The status and the history are left untouched.
    """
    
    def __init__(self, unit_of_work: IUnitOfWork):
        self.uow = unit_of_work
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(
        self,
        application_id: int,
        actor: Actor,
        form_data: Mapping[str, Any],
    ) -> Application:
        """
        Update the form payload.
        
        Args:
            application_id: Application to edit
            actor: Owner or admin
            form_data: New payload, replaces the old one
            
        Returns:
            The updated application
            
        Raises:
            NotFoundError: If the application does not exist
            ForbiddenError: If the actor may not edit it
            ValidationError: If the payload is malformed
        """
        payload = FormData(form_data)
        
        async with self.uow:
            application = await load_accessible_application(
                self.uow, application_id, actor, for_update=True
            )
            if not actor.is_admin and not application.is_editable_by_owner():
                raise ForbiddenError(
                    f"Application {application_id} is {application.status.value} "
                    "and can no longer be edited",
                    context={"application_id": application_id},
                )
            application.replace_form_data(payload)
            application = await self.uow.applications.update(application)
        
        self.logger.info(f"Application {application_id} form updated by {actor}")
        return application
