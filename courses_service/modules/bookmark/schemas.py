"""Pydantic schemas for bookmark RPCs."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..access.schemas import ActiveUser
from ..common.schemas import IdsRequest, PageRequest


class BookmarkRead(BaseModel):
    id: int
    title: str
    page_id: int
    document_id: int


class GetDocumentBookmarksRequest(PageRequest):
    document_id: int = Field(description="Document whose bookmarks to list")


class GetDocumentBookmarksResponse(BaseModel):
    bookmarks: List[BookmarkRead]
    total: int


class GetBookmarksByIDsRequest(IdsRequest):
    pass


class GetBookmarksByIDsResponse(BaseModel):
    bookmarks: List[BookmarkRead]


class CreateBookmarkRequest(BaseModel):
    title: str = Field(max_length=255, description="Bookmark title")
    page_id: int = Field(description="Page the bookmark points at")
    document_id: int = Field(description="Document the page belongs to")
    active_user: Optional[ActiveUser] = None


class CreateBookmarkResponse(BaseModel):
    bookmark: BookmarkRead


class DeleteBookmarkRequest(BaseModel):
    bookmark_id: int
    active_user: Optional[ActiveUser] = None
