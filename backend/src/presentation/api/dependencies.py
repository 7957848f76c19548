"""FastAPI dependency injection setup."""

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from application.interfaces import INotificationService, IUnitOfWork
from application.services import ApplicationLifecycleManager
from application.use_cases import (
    GetApplicationUseCase,
    ListApplicationsUseCase,
    ListDocumentsUseCase,
    RegisterDocumentUseCase,
    UpdateApplicationFormUseCase,
)
from domain.enums import UserRole
from domain.policies import TransitionPolicy
from domain.value_objects import Actor
from infrastructure.config import Settings, get_settings
from infrastructure.database import get_session
from infrastructure.database.unit_of_work import SQLAlchemyUnitOfWork
from infrastructure.notifications import SMTPNotificationService
from presentation.api.errors import UnauthorizedError


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


def get_unit_of_work(session: AsyncSession = Depends(get_db_session)) -> IUnitOfWork:
    """Get unit of work dependency."""
    return SQLAlchemyUnitOfWork(session)


# Identity supplied by the upstream identity provider
def get_current_actor(
    x_user_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> Actor:
    """
    Build the actor from the identity headers.
    
    Raises:
        UnauthorizedError: If the identity is missing or malformed
    """
    if not x_user_id:
        raise UnauthorizedError()
    try:
        role = UserRole((x_user_role or UserRole.STUDENT.value).lower())
        return Actor(user_id=int(x_user_id), role=role)
    except ValueError:
        raise UnauthorizedError() from None


# Lifecycle dependencies
def get_transition_policy(settings: Settings = Depends(get_settings)) -> TransitionPolicy:
    """Get transition policy dependency."""
    return TransitionPolicy(strict=settings.lifecycle_strict_transitions)


def get_notification_service(
    settings: Settings = Depends(get_settings),
) -> Optional[INotificationService]:
    """Get notification service dependency, None when SMTP is not configured."""
    if not settings.smtp_configured:
        return None
    return SMTPNotificationService(settings)


def get_lifecycle_manager(
    uow: IUnitOfWork = Depends(get_unit_of_work),
    policy: TransitionPolicy = Depends(get_transition_policy),
    notification_service: Optional[INotificationService] = Depends(get_notification_service),
) -> ApplicationLifecycleManager:
    """Get lifecycle manager dependency."""
    return ApplicationLifecycleManager(
        unit_of_work=uow,
        policy=policy,
        notification_service=notification_service,
    )


# Use case dependencies
def get_list_applications_use_case(
    uow: IUnitOfWork = Depends(get_unit_of_work),
) -> ListApplicationsUseCase:
    return ListApplicationsUseCase(uow)


def get_application_use_case(
    uow: IUnitOfWork = Depends(get_unit_of_work),
) -> GetApplicationUseCase:
    return GetApplicationUseCase(uow)


def get_update_form_use_case(
    uow: IUnitOfWork = Depends(get_unit_of_work),
) -> UpdateApplicationFormUseCase:
    return UpdateApplicationFormUseCase(uow)


def get_register_document_use_case(
    uow: IUnitOfWork = Depends(get_unit_of_work),
    settings: Settings = Depends(get_settings),
) -> RegisterDocumentUseCase:
    return RegisterDocumentUseCase(uow, settings.allowed_document_extensions)


def get_list_documents_use_case(
    uow: IUnitOfWork = Depends(get_unit_of_work),
) -> ListDocumentsUseCase:
    return ListDocumentsUseCase(uow)
