"""Pydantic schemas for track RPCs."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..access.schemas import ActiveUser
from ..common.schemas import IdsRequest, PageRequest


class TrackRead(BaseModel):
    id: int
    track_number: int
    title: str
    audio_path: str
    document_id: int


class GetDocumentTracksRequest(PageRequest):
    document_id: int = Field(description="Document whose tracks to list")


class GetDocumentTracksResponse(BaseModel):
    tracks: List[TrackRead]
    total: int


class GetTracksByIDsRequest(IdsRequest):
    pass


class GetTracksByIDsResponse(BaseModel):
    tracks: List[TrackRead]


class UpdateTrackTitleRequest(BaseModel):
    """Rename a track; restricted to moderators and administrators."""

    track_id: int
    title: str = Field(max_length=255, description="New track title")
    active_user: Optional[ActiveUser] = None


class UpdateTrackTitleResponse(BaseModel):
    track: TrackRead
