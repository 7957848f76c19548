"""Application endpoints: CRUD, status workflow and history."""

from typing import Literal

from fastapi import APIRouter, Depends, Query, status

from application.services import ApplicationLifecycleManager
from application.use_cases import (
    GetApplicationUseCase,
    ListApplicationsUseCase,
    UpdateApplicationFormUseCase,
)
from domain.value_objects import Actor
from presentation.api.dependencies import (
    get_application_use_case,
    get_current_actor,
    get_lifecycle_manager,
    get_list_applications_use_case,
    get_update_form_use_case,
)
from presentation.schemas import (
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationUpdateRequest,
    ErrorResponse,
    HistoryEntryResponse,
    NoteCreateRequest,
    StatusUpdateRequest,
)

router = APIRouter(
    prefix="/applications",
    tags=["applications"],
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)


@router.get("", response_model=list[ApplicationResponse])
async def list_applications(
    actor: Actor = Depends(get_current_actor),
    use_case: ListApplicationsUseCase = Depends(get_list_applications_use_case),
) -> list[ApplicationResponse]:
    """List all applications for admins, own applications for everybody else."""
    applications = await use_case.execute(actor)
    return [ApplicationResponse.from_entity(app) for app in applications]


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    request: ApplicationCreateRequest,
    actor: Actor = Depends(get_current_actor),
    manager: ApplicationLifecycleManager = Depends(get_lifecycle_manager),
) -> ApplicationResponse:
    """Create a draft application owned by the caller."""
    application = await manager.create(actor, request.form_data)
    return ApplicationResponse.from_entity(application)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: GetApplicationUseCase = Depends(get_application_use_case),
) -> ApplicationResponse:
    application = await use_case.execute(application_id, actor)
    return ApplicationResponse.from_entity(application)


@router.put("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: int,
    request: ApplicationUpdateRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: UpdateApplicationFormUseCase = Depends(get_update_form_use_case),
) -> ApplicationResponse:
    """Replace the form payload. Owners can only edit drafts."""
    application = await use_case.execute(application_id, actor, request.form_data)
    return ApplicationResponse.from_entity(application)


@router.put("/{application_id}/status", response_model=ApplicationResponse)
async def update_status(
    application_id: int,
    request: StatusUpdateRequest,
    actor: Actor = Depends(get_current_actor),
    manager: ApplicationLifecycleManager = Depends(get_lifecycle_manager),
) -> ApplicationResponse:
    """
    Change the status of an application.
    
    Owners may only submit their draft; admins may set any reviewable status.
    """
    application = await manager.change_status(
        application_id, actor, request.status, request.notes
    )
    return ApplicationResponse.from_entity(application)


@router.post(
    "/{application_id}/notes",
    response_model=HistoryEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_note(
    application_id: int,
    request: NoteCreateRequest,
    actor: Actor = Depends(get_current_actor),
    manager: ApplicationLifecycleManager = Depends(get_lifecycle_manager),
) -> HistoryEntryResponse:
    """Add a reviewer note without changing the status."""
    entry = await manager.add_note(application_id, actor, request.notes)
    return HistoryEntryResponse.from_entity(entry)


@router.get("/{application_id}/history", response_model=list[HistoryEntryResponse])
async def get_history(
    application_id: int,
    order: Literal["asc", "desc"] = Query("asc", description="asc = oldest first"),
    actor: Actor = Depends(get_current_actor),
    manager: ApplicationLifecycleManager = Depends(get_lifecycle_manager),
) -> list[HistoryEntryResponse]:
    """Get the audit trail of an application."""
    entries = await manager.get_history(application_id, actor, newest_first=order == "desc")
    return [HistoryEntryResponse.from_entity(entry) for entry in entries]
