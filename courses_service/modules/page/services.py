"""Page retrieval service."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..common.batch import fetch_by_ids, fetch_page
from .crud import page_crud
from .mappers import to_page_read
from .schemas import GetDocumentPagesResponse, GetPagesByIDsResponse


class PageService:
    """Read access to document pages."""

    async def get_document_pages(
        self,
        document_id: int,
        db: AsyncSession,
        limit: int,
        offset: int,
    ) -> GetDocumentPagesResponse:
        """Get one page of a document's pages, ordered by id.

        Args:
            document_id: Document whose pages to list
            db: Database session
            limit: Maximum number of pages to return
            offset: Number of pages to skip
        """
        rows = await fetch_page(db, page_crud, limit, offset, document=document_id)
        pages = [to_page_read(row) for row in rows]
        return GetDocumentPagesResponse(pages=pages, total=len(pages))

    async def get_pages_by_ids(
        self,
        ids: List[int],
        db: AsyncSession,
    ) -> GetPagesByIDsResponse:
        rows = await fetch_by_ids(db, page_crud, ids)
        return GetPagesByIDsResponse(pages=[to_page_read(row) for row in rows])
