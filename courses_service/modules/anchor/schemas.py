"""Pydantic schemas for anchor RPCs."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..access.schemas import ActiveUser
from ..common.schemas import IdsRequest


class AnchorRead(BaseModel):
    """Anchor as returned to clients; a missing title is an empty string."""

    id: int
    title: str
    track_time: float
    position_top: float
    position_left: float
    page_id: int
    track_id: int
    created_at: str
    updated_at: str


class AnchorCreateBase(BaseModel):
    """Fields shared by moderator anchors and user anchors on creation."""

    title: Optional[str] = Field(default=None, description="Optional label")
    track_time: float = Field(description="Position in the track, in seconds")
    position_top: float = Field(description="Vertical position on the page")
    position_left: float = Field(description="Horizontal position on the page")
    page_id: int
    track_id: int
    active_user: Optional[ActiveUser] = None


class PageAnchors(BaseModel):
    anchors: List[AnchorRead] = Field(default_factory=list)


class GetAnchorsByPageIDsRequest(IdsRequest):
    pass


class GetAnchorsByPageIDsResponse(BaseModel):
    """Anchors grouped by page id. Pages without anchors are not listed."""

    anchors: Dict[int, PageAnchors]


class GetAnchorsByIDsRequest(IdsRequest):
    pass


class GetAnchorsByIDsResponse(BaseModel):
    anchors: List[AnchorRead]


class CreateAnchorRequest(AnchorCreateBase):
    pass


class CreateAnchorResponse(BaseModel):
    anchor: AnchorRead


class DeleteAnchorRequest(BaseModel):
    id: int
    active_user: Optional[ActiveUser] = None
