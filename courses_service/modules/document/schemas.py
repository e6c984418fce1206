"""Pydantic schemas for document RPCs."""

from typing import List

from pydantic import BaseModel

from ..common.schemas import IdsRequest, PageRequest


class DocumentRead(BaseModel):
    """Document as returned to clients."""

    id: int
    title: str
    created_at: str
    updated_at: str


class GetDocumentsRequest(PageRequest):
    pass


class GetDocumentsResponse(BaseModel):
    documents: List[DocumentRead]
    total: int


class GetDocumentsByIDsRequest(IdsRequest):
    pass


class GetDocumentsByIDsResponse(BaseModel):
    documents: List[DocumentRead]
