"""Page RPC endpoints."""

from fastapi import APIRouter, Depends

from ....modules.page.schemas import (
    GetDocumentPagesRequest,
    GetDocumentPagesResponse,
    GetPagesByIDsRequest,
    GetPagesByIDsResponse,
)
from ....modules.page.services import PageService
from ..dependencies import DbSession, get_page_service

router = APIRouter(prefix="/courses", tags=["Pages"])


@router.post(
    "/GetDocumentPages",
    summary="List Document Pages",
    description="""
    Returns one window of the pages of a document, ordered by id.

    - **document_id**: Document whose pages to list
    - **limit**: Maximum number of pages to return (default: 50)
    - **offset**: Number of pages to skip (default: 0)
    """,
    responses={
        200: {"description": "Pages in the requested window"},
        422: {"description": "Invalid request"},
    },
)
async def get_document_pages(
    payload: GetDocumentPagesRequest,
    db: DbSession,
    service: PageService = Depends(get_page_service),
) -> GetDocumentPagesResponse:
    """List the pages of a document."""
    return await service.get_document_pages(payload.document_id, db, limit=payload.limit, offset=payload.offset)


@router.post(
    "/GetPagesByIDs",
    summary="Resolve Pages by ID",
    description="Returns the pages whose ids were requested. Unknown ids are skipped.",
)
async def get_pages_by_ids(
    payload: GetPagesByIDsRequest,
    db: DbSession,
    service: PageService = Depends(get_page_service),
) -> GetPagesByIDsResponse:
    return await service.get_pages_by_ids(payload.ids, db)
