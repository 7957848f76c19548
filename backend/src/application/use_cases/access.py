"""Shared lookup and access checks for application-scoped use cases."""

from application.interfaces import IUnitOfWork
from domain.entities import Application
from domain.exceptions import ForbiddenError, NotFoundError
from domain.value_objects import Actor


async def load_application(
    uow: IUnitOfWork,
    application_id: int,
    for_update: bool = False,
) -> Application:
    """
    Load an application or fail.
    
    Raises:
        NotFoundError: If no application has this id
    """
    application = await uow.applications.get_by_id(application_id, for_update=for_update)
    if application is None:
        raise NotFoundError(
            f"Application {application_id} not found",
            context={"application_id": application_id},
        )
    return application


async def load_accessible_application(
    uow: IUnitOfWork,
    application_id: int,
    actor: Actor,
    for_update: bool = False,
) -> Application:
    """
    Load an application the actor is allowed to see.
    
    Raises:
        NotFoundError: If no application has this id
        ForbiddenError: If the actor is neither the owner nor an admin
    """
    application = await load_application(uow, application_id, for_update=for_update)
    if not actor.can_access(application.owner_id):
        raise ForbiddenError(
            "Access forbidden",
            context={"application_id": application_id, "actor": str(actor)},
        )
    return application
