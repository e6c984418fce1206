"""Pydantic schemas for user anchor RPCs."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..access.schemas import ActiveUser
from ..anchor.schemas import AnchorCreateBase, AnchorRead
from ..common.schemas import IdsRequest


class UserAnchorRead(AnchorRead):
    owner: int


class PageUserAnchors(BaseModel):
    user_anchors: List[UserAnchorRead] = Field(default_factory=list)


class GetUserAnchorsByPageIDsRequest(IdsRequest):
    pass


class GetUserAnchorsByPageIDsResponse(BaseModel):
    """User anchors grouped by page id. Pages without any are not listed."""

    user_anchors: Dict[int, PageUserAnchors]


class GetUserAnchorsByIDsRequest(IdsRequest):
    pass


class GetUserAnchorsByIDsResponse(BaseModel):
    user_anchors: List[UserAnchorRead]


class CreateUserAnchorRequest(AnchorCreateBase):
    """Same fields as a moderator anchor; the owner is the calling user."""


class CreateUserAnchorResponse(BaseModel):
    user_anchor: UserAnchorRead


class DeleteUserAnchorRequest(BaseModel):
    id: int
    active_user: Optional[ActiveUser] = None
