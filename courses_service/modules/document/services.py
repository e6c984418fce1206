"""Document retrieval service."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..common.batch import fetch_by_ids, fetch_page
from .crud import document_crud
from .mappers import to_document_read
from .schemas import GetDocumentsByIDsResponse, GetDocumentsResponse


class DocumentService:
    """Read access to course documents.

    Documents are managed outside this service; clients can only list them
    or resolve them in batches by id.
    """

    async def get_documents(
        self,
        db: AsyncSession,
        limit: int,
        offset: int,
    ) -> GetDocumentsResponse:
        """Get one page of documents.

        ``total`` is the number of documents in this page, not in the table.

        Args:
            db: Database session
            limit: Maximum number of documents to return
            offset: Number of documents to skip
        """
        rows = await fetch_page(db, document_crud, limit, offset)
        documents = [to_document_read(row) for row in rows]
        return GetDocumentsResponse(documents=documents, total=len(documents))

    async def get_documents_by_ids(
        self,
        ids: List[int],
        db: AsyncSession,
    ) -> GetDocumentsByIDsResponse:
        """Resolve documents by id; unknown ids are left out."""
        rows = await fetch_by_ids(db, document_crud, ids)
        return GetDocumentsByIDsResponse(documents=[to_document_read(row) for row in rows])
