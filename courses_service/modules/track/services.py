"""Track retrieval and title management service."""

from typing import List

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.logging import get_logger
from ..access import Action, Principal, authorize
from ..common.batch import fetch_by_ids, fetch_page
from ..common.store import write_returning_one
from .crud import track_crud
from .mappers import to_track_read
from .models import Track
from .schemas import GetDocumentTracksResponse, GetTracksByIDsResponse, UpdateTrackTitleResponse

logger = get_logger(__name__)


class TrackService:
    """Service for a document's audio tracks.

    Tracks are read by anyone; renaming one is the only write this service
    allows on existing content and needs an elevated role.
    """

    async def get_document_tracks(
        self,
        document_id: int,
        db: AsyncSession,
        limit: int,
        offset: int,
    ) -> GetDocumentTracksResponse:
        """Get one page of a document's tracks, ordered by id.

        Args:
            document_id: Document whose tracks to list
            db: Database session
            limit: Maximum number of tracks to return
            offset: Number of tracks to skip
        """
        rows = await fetch_page(db, track_crud, limit, offset, document=document_id)
        tracks = [to_track_read(row) for row in rows]
        return GetDocumentTracksResponse(tracks=tracks, total=len(tracks))

    async def get_tracks_by_ids(
        self,
        ids: List[int],
        db: AsyncSession,
    ) -> GetTracksByIDsResponse:
        rows = await fetch_by_ids(db, track_crud, ids)
        return GetTracksByIDsResponse(tracks=[to_track_read(row) for row in rows])

    async def update_track_title(
        self,
        track_id: int,
        title: str,
        principal: Principal,
        db: AsyncSession,
    ) -> UpdateTrackTitleResponse:
        """Rename a track.

        Args:
            track_id: Track to rename
            title: New title
            principal: Caller issuing the request
            db: Database session

        Returns:
            The updated track

        Raises:
            PermissionDeniedError: If the caller is not a moderator or administrator
            StoreFailureError: If no track has this id or the update fails
        """
        authorize(Action.UPDATE_TRACK_TITLE, principal)

        stmt = update(Track).where(Track.id == track_id).values(title=title).returning(*Track.__table__.c)
        row = await write_returning_one(db, stmt)

        logger.info(f"Track {track_id} renamed", extra={"track_id": track_id})
        return UpdateTrackTitleResponse(track=to_track_read(row))
