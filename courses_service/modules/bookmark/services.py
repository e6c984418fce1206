"""Bookmark management service."""

from typing import List

from sqlalchemy import delete, insert
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.logging import get_logger
from ..access import Action, Principal, authorize
from ..common.batch import fetch_by_ids, fetch_page
from ..common.schemas import DeleteResponse
from ..common.store import write, write_returning_one
from .crud import bookmark_crud
from .mappers import to_bookmark_read
from .models import Bookmark
from .schemas import (
    CreateBookmarkRequest,
    CreateBookmarkResponse,
    GetBookmarksByIDsResponse,
    GetDocumentBookmarksResponse,
)

logger = get_logger(__name__)


class BookmarkService:
    """Service for document bookmarks.

    Bookmarks are shared by every reader of a document, so only moderators
    and administrators may create or delete them.
    """

    async def get_document_bookmarks(
        self,
        document_id: int,
        db: AsyncSession,
        limit: int,
        offset: int,
    ) -> GetDocumentBookmarksResponse:
        """Get one page of a document's bookmarks, ordered by id."""
        rows = await fetch_page(db, bookmark_crud, limit, offset, document=document_id)
        bookmarks = [to_bookmark_read(row) for row in rows]
        return GetDocumentBookmarksResponse(bookmarks=bookmarks, total=len(bookmarks))

    async def get_bookmarks_by_ids(
        self,
        ids: List[int],
        db: AsyncSession,
    ) -> GetBookmarksByIDsResponse:
        rows = await fetch_by_ids(db, bookmark_crud, ids)
        return GetBookmarksByIDsResponse(bookmarks=[to_bookmark_read(row) for row in rows])

    async def create_bookmark(
        self,
        bookmark_data: CreateBookmarkRequest,
        principal: Principal,
        db: AsyncSession,
    ) -> CreateBookmarkResponse:
        """Create a bookmark.

        Args:
            bookmark_data: Title and target page/document
            principal: Caller issuing the request
            db: Database session

        Raises:
            PermissionDeniedError: If the caller is not a moderator or administrator
            StoreFailureError: If the page or document does not exist
        """
        authorize(Action.CREATE_BOOKMARK, principal)

        stmt = (
            insert(Bookmark)
            .values(
                title=bookmark_data.title,
                document_page=bookmark_data.page_id,
                document=bookmark_data.document_id,
            )
            .returning(*Bookmark.__table__.c)
        )
        row = await write_returning_one(db, stmt)

        logger.info(f"Bookmark {row.id} created", extra={"bookmark_id": row.id, "document_id": row.document})
        return CreateBookmarkResponse(bookmark=to_bookmark_read(row))

    async def delete_bookmark(
        self,
        bookmark_id: int,
        principal: Principal,
        db: AsyncSession,
    ) -> DeleteResponse:
        """Delete a bookmark. Deleting an id that does not exist still succeeds."""
        authorize(Action.DELETE_BOOKMARK, principal)

        await write(db, delete(Bookmark).where(Bookmark.id == bookmark_id))

        logger.info(f"Bookmark {bookmark_id} deleted", extra={"bookmark_id": bookmark_id})
        return DeleteResponse(success=True)
