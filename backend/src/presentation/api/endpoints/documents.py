"""Document metadata endpoints."""

from fastapi import APIRouter, Depends, status

from application.use_cases import ListDocumentsUseCase, RegisterDocumentUseCase
from domain.value_objects import Actor
from presentation.api.dependencies import (
    get_current_actor,
    get_list_documents_use_case,
    get_register_document_use_case,
)
from presentation.schemas import DocumentCreateRequest, DocumentResponse, ErrorResponse

router = APIRouter(
    prefix="/applications/{application_id}/documents",
    tags=["documents"],
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def register_document(
    application_id: int,
    request: DocumentCreateRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: RegisterDocumentUseCase = Depends(get_register_document_use_case),
) -> DocumentResponse:
    """
    Record a file already uploaded to the blob store.
    
    The client uploads the bytes itself and sends the resulting locator.
    """
    document = await use_case.execute(
        application_id, actor, request.file_name, request.storage_path
    )
    return DocumentResponse.from_entity(document)


@router.get("", response_model=list[DocumentResponse])
async def list_documents(
    application_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: ListDocumentsUseCase = Depends(get_list_documents_use_case),
) -> list[DocumentResponse]:
    documents = await use_case.execute(application_id, actor)
    return [DocumentResponse.from_entity(doc) for doc in documents]
