"""Document RPC endpoints."""

from fastapi import APIRouter, Depends

from ....modules.document.schemas import (
    GetDocumentsByIDsRequest,
    GetDocumentsByIDsResponse,
    GetDocumentsRequest,
    GetDocumentsResponse,
)
from ....modules.document.services import DocumentService
from ..dependencies import DbSession, get_document_service

router = APIRouter(prefix="/courses", tags=["Documents"])


@router.post(
    "/GetDocuments",
    summary="List Documents",
    description="""
    Returns one window of documents ordered by id.

    - **limit**: Maximum number of documents to return (default: 50)
    - **offset**: Number of documents to skip (default: 0)

    `total` counts the documents in this response, not in the whole store.
    """,
    responses={
        200: {"description": "Documents in the requested window"},
        422: {"description": "Invalid pagination parameters"},
    },
)
async def get_documents(
    payload: GetDocumentsRequest,
    db: DbSession,
    service: DocumentService = Depends(get_document_service),
) -> GetDocumentsResponse:
    """List documents."""
    return await service.get_documents(db, limit=payload.limit, offset=payload.offset)


@router.post(
    "/GetDocumentsByIDs",
    summary="Resolve Documents by ID",
    description="Returns the documents whose ids were requested. Unknown ids are skipped.",
)
async def get_documents_by_ids(
    payload: GetDocumentsByIDsRequest,
    db: DbSession,
    service: DocumentService = Depends(get_document_service),
) -> GetDocumentsByIDsResponse:
    return await service.get_documents_by_ids(payload.ids, db)
