"""Pydantic schemas for page RPCs."""

from typing import List

from pydantic import BaseModel, Field

from ..common.schemas import IdsRequest, PageRequest


class PageRead(BaseModel):
    id: int
    page_number: int
    image_path: str
    aspect_ratio: float
    height: int
    document_id: int


class GetDocumentPagesRequest(PageRequest):
    document_id: int = Field(description="Document whose pages to list")


class GetDocumentPagesResponse(BaseModel):
    pages: List[PageRead]
    total: int


class GetPagesByIDsRequest(IdsRequest):
    pass


class GetPagesByIDsResponse(BaseModel):
    pages: List[PageRead]
