"""Track RPC endpoints."""

from fastapi import APIRouter, Depends

from ....modules.access.schemas import principal_from
from ....modules.track.schemas import (
    GetDocumentTracksRequest,
    GetDocumentTracksResponse,
    GetTracksByIDsRequest,
    GetTracksByIDsResponse,
    UpdateTrackTitleRequest,
    UpdateTrackTitleResponse,
)
from ....modules.track.services import TrackService
from ..dependencies import DbSession, get_track_service

router = APIRouter(prefix="/courses", tags=["Tracks"])


@router.post(
    "/GetDocumentTracks",
    summary="List Document Tracks",
    description="""
    Returns one window of the audio tracks of a document, ordered by id.

    - **document_id**: Document whose tracks to list
    - **limit**: Maximum number of tracks to return (default: 50)
    - **offset**: Number of tracks to skip (default: 0)
    """,
)
async def get_document_tracks(
    payload: GetDocumentTracksRequest,
    db: DbSession,
    service: TrackService = Depends(get_track_service),
) -> GetDocumentTracksResponse:
    """List the tracks of a document."""
    return await service.get_document_tracks(payload.document_id, db, limit=payload.limit, offset=payload.offset)


@router.post(
    "/GetTracksByIDs",
    summary="Resolve Tracks by ID",
    description="Returns the tracks whose ids were requested. Unknown ids are skipped.",
)
async def get_tracks_by_ids(
    payload: GetTracksByIDsRequest,
    db: DbSession,
    service: TrackService = Depends(get_track_service),
) -> GetTracksByIDsResponse:
    return await service.get_tracks_by_ids(payload.ids, db)


@router.post(
    "/UpdateTrackTitle",
    summary="Rename Track",
    description="""
    Changes the title of a track. Requires a moderator or administrator
    in **active_user**.
    """,
    responses={
        200: {"description": "Track renamed"},
        403: {"description": "Caller missing or not a moderator/administrator"},
        500: {"description": "Track not found or store failure"},
    },
)
async def update_track_title(
    payload: UpdateTrackTitleRequest,
    db: DbSession,
    service: TrackService = Depends(get_track_service),
) -> UpdateTrackTitleResponse:
    """Rename a track."""
    return await service.update_track_title(payload.track_id, payload.title, principal_from(payload.active_user), db)
