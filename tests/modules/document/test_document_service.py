"""Tests for document service."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from courses_service.modules.document.services import DocumentService


@pytest.fixture
def document_service():
    """Create document service instance."""
    return DocumentService()


async def test_get_documents(
    document_service: DocumentService, db_session: AsyncSession, test_document: dict, test_document_2: dict
):
    """Test listing documents in id order."""
    result = await document_service.get_documents(db_session, limit=50, offset=0)

    assert [doc.id for doc in result.documents] == sorted([test_document["id"], test_document_2["id"]])
    assert result.total == 2


async def test_get_documents_window(
    document_service: DocumentService, db_session: AsyncSession, test_document: dict, test_document_2: dict
):
    """Test that limit and offset select one window and total counts the window."""
    first = await document_service.get_documents(db_session, limit=1, offset=0)
    second = await document_service.get_documents(db_session, limit=1, offset=1)
    past_end = await document_service.get_documents(db_session, limit=1, offset=2)

    assert first.total == 1
    assert second.total == 1
    assert first.documents[0].id != second.documents[0].id
    assert past_end.documents == []
    assert past_end.total == 0


async def test_get_documents_zero_limit(document_service: DocumentService, db_session: AsyncSession, test_document: dict):
    result = await document_service.get_documents(db_session, limit=0, offset=0)

    assert result.documents == []
    assert result.total == 0


async def test_document_timestamps_are_utc_text(
    document_service: DocumentService, db_session: AsyncSession, test_document: dict
):
    result = await document_service.get_documents(db_session, limit=50, offset=0)

    document = result.documents[0]
    assert document.title == test_document["title"]
    assert document.created_at.endswith("+00:00")
    assert document.updated_at.endswith("+00:00")


async def test_get_documents_by_ids(
    document_service: DocumentService, db_session: AsyncSession, test_document: dict, test_document_2: dict
):
    """Test that unknown ids are dropped from a batch lookup."""
    result = await document_service.get_documents_by_ids([test_document["id"], 99999], db_session)

    assert [doc.id for doc in result.documents] == [test_document["id"]]


async def test_get_documents_by_ids_empty(document_service: DocumentService, db_session: AsyncSession):
    result = await document_service.get_documents_by_ids([], db_session)

    assert result.documents == []
