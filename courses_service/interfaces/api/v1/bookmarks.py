"""Bookmark RPC endpoints."""

from fastapi import APIRouter, Depends

from ....modules.access.schemas import principal_from
from ....modules.bookmark.schemas import (
    CreateBookmarkRequest,
    CreateBookmarkResponse,
    DeleteBookmarkRequest,
    GetBookmarksByIDsRequest,
    GetBookmarksByIDsResponse,
    GetDocumentBookmarksRequest,
    GetDocumentBookmarksResponse,
)
from ....modules.bookmark.services import BookmarkService
from ....modules.common.schemas import DeleteResponse
from ..dependencies import DbSession, get_bookmark_service

router = APIRouter(prefix="/courses", tags=["Bookmarks"])


@router.post(
    "/GetDocumentBookmarks",
    summary="List Document Bookmarks",
    description="""
    Returns one window of the bookmarks of a document, ordered by id.

    - **document_id**: Document whose bookmarks to list
    - **limit**: Maximum number of bookmarks to return (default: 50)
    - **offset**: Number of bookmarks to skip (default: 0)
    """,
)
async def get_document_bookmarks(
    payload: GetDocumentBookmarksRequest,
    db: DbSession,
    service: BookmarkService = Depends(get_bookmark_service),
) -> GetDocumentBookmarksResponse:
    """List the bookmarks of a document."""
    return await service.get_document_bookmarks(payload.document_id, db, limit=payload.limit, offset=payload.offset)


@router.post(
    "/GetBookmarksByIDs",
    summary="Resolve Bookmarks by ID",
    description="Returns the bookmarks whose ids were requested. Unknown ids are skipped.",
)
async def get_bookmarks_by_ids(
    payload: GetBookmarksByIDsRequest,
    db: DbSession,
    service: BookmarkService = Depends(get_bookmark_service),
) -> GetBookmarksByIDsResponse:
    return await service.get_bookmarks_by_ids(payload.ids, db)


@router.post(
    "/CreateBookmark",
    summary="Create Bookmark",
    description="""
    Creates a bookmark on a page. Requires a moderator or administrator
    in **active_user**.

    - **title**: Bookmark title
    - **page_id**: Page the bookmark points at
    - **document_id**: Document the page belongs to
    """,
    responses={
        200: {"description": "Bookmark created"},
        403: {"description": "Caller missing or not a moderator/administrator"},
        500: {"description": "Unknown page/document or store failure"},
    },
)
async def create_bookmark(
    payload: CreateBookmarkRequest,
    db: DbSession,
    service: BookmarkService = Depends(get_bookmark_service),
) -> CreateBookmarkResponse:
    """Create a bookmark."""
    return await service.create_bookmark(payload, principal_from(payload.active_user), db)


@router.post(
    "/DeleteBookmark",
    summary="Delete Bookmark",
    description="Permanently deletes a bookmark. Requires a moderator or administrator.",
    responses={
        200: {"description": "Bookmark deleted"},
        403: {"description": "Caller missing or not a moderator/administrator"},
    },
)
async def delete_bookmark(
    payload: DeleteBookmarkRequest,
    db: DbSession,
    service: BookmarkService = Depends(get_bookmark_service),
) -> DeleteResponse:
    """Delete a bookmark."""
    return await service.delete_bookmark(payload.bookmark_id, principal_from(payload.active_user), db)
