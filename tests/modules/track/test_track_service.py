"""Tests for track service."""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from courses_service.modules.common.exceptions import PermissionDeniedError, StoreFailureError
from courses_service.modules.track.models import Track
from courses_service.modules.track.services import TrackService


@pytest.fixture
def track_service():
    """Create track service instance."""
    return TrackService()


async def stored_title(db: AsyncSession, track_id: int) -> str:
    result = await db.execute(select(Track.title).where(Track.id == track_id))
    return result.scalar_one()


async def test_get_document_tracks(
    track_service: TrackService, db_session: AsyncSession, test_document: dict, test_tracks: list
):
    result = await track_service.get_document_tracks(test_document["id"], db_session, limit=50, offset=0)

    assert [track.id for track in result.tracks] == [track["id"] for track in test_tracks]
    assert [track.title for track in result.tracks] == ["Lecture 1", "Lecture 2"]
    assert result.total == 2


async def test_get_tracks_by_ids(track_service: TrackService, db_session: AsyncSession, test_tracks: list):
    result = await track_service.get_tracks_by_ids([test_tracks[1]["id"], 99999], db_session)

    assert [track.id for track in result.tracks] == [test_tracks[1]["id"]]


async def test_update_track_title(track_service: TrackService, db_session: AsyncSession, test_tracks: list, moderator):
    track_id = test_tracks[0]["id"]

    result = await track_service.update_track_title(track_id, "Lecture 1 (revised)", moderator, db_session)

    assert result.track.id == track_id
    assert result.track.title == "Lecture 1 (revised)"
    assert result.track.track_number == 1
    assert await stored_title(db_session, track_id) == "Lecture 1 (revised)"


async def test_update_track_title_standard_user_denied(
    track_service: TrackService, db_session: AsyncSession, test_tracks: list, owner
):
    """Test that a denied rename leaves the track untouched."""
    track_id = test_tracks[0]["id"]

    with pytest.raises(PermissionDeniedError, match="Only moderators may update tracks."):
        await track_service.update_track_title(track_id, "Hijacked", owner, db_session)

    assert await stored_title(db_session, track_id) == "Lecture 1"


async def test_update_track_title_anonymous_denied(
    track_service: TrackService, db_session: AsyncSession, test_tracks: list, anonymous
):
    with pytest.raises(PermissionDeniedError, match="You must be logged in to update tracks."):
        await track_service.update_track_title(test_tracks[0]["id"], "Hijacked", anonymous, db_session)


async def test_update_track_title_not_found(track_service: TrackService, db_session: AsyncSession, moderator):
    with pytest.raises(StoreFailureError):
        await track_service.update_track_title(99999, "Missing", moderator, db_session)
