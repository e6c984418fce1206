"""Tests for user anchor service."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from courses_service.modules.common.exceptions import PermissionDeniedError, StoreFailureError
from courses_service.modules.user_anchor.models import UserAnchor
from courses_service.modules.user_anchor.schemas import CreateUserAnchorRequest
from courses_service.modules.user_anchor.services import UserAnchorService


@pytest.fixture
def user_anchor_service():
    """Create user anchor service instance."""
    return UserAnchorService()


async def count_user_anchors(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(UserAnchor))
    return result.scalar_one()


def make_request(page_id: int, track_id: int) -> CreateUserAnchorRequest:
    return CreateUserAnchorRequest(
        title="My note",
        track_time=5.5,
        position_top=0.3,
        position_left=0.7,
        page_id=page_id,
        track_id=track_id,
    )


async def test_create_user_anchor_sets_owner_from_caller(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, test_pages: list, test_tracks: list, other_user
):
    result = await user_anchor_service.create_user_anchor(
        make_request(test_pages[1]["id"], test_tracks[0]["id"]), other_user, db_session
    )

    user_anchor = result.user_anchor
    assert user_anchor.owner == other_user.caller.id
    assert user_anchor.title == "My note"
    assert user_anchor.page_id == test_pages[1]["id"]
    assert user_anchor.created_at == user_anchor.updated_at


async def test_create_user_anchor_anonymous_denied(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, test_pages: list, test_tracks: list, anonymous
):
    with pytest.raises(PermissionDeniedError, match="You must be logged in to create user anchors."):
        await user_anchor_service.create_user_anchor(
            make_request(test_pages[0]["id"], test_tracks[0]["id"]), anonymous, db_session
        )

    assert await count_user_anchors(db_session) == 0


async def test_create_user_anchor_unknown_page(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, test_tracks: list, owner
):
    with pytest.raises(StoreFailureError):
        await user_anchor_service.create_user_anchor(make_request(99999, test_tracks[0]["id"]), owner, db_session)


async def test_get_user_anchors_by_page_ids(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, test_pages: list, test_user_anchor: dict
):
    page_ids = [page["id"] for page in test_pages]

    result = await user_anchor_service.get_user_anchors_by_page_ids(page_ids, db_session)

    assert list(result.user_anchors) == [test_pages[0]["id"]]
    [user_anchor] = result.user_anchors[test_pages[0]["id"]].user_anchors
    assert user_anchor.id == test_user_anchor["id"]
    assert user_anchor.owner == test_user_anchor["owner"]


async def test_get_user_anchors_by_ids(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, test_user_anchor: dict
):
    result = await user_anchor_service.get_user_anchors_by_ids([test_user_anchor["id"], 99999], db_session)

    assert [user_anchor.id for user_anchor in result.user_anchors] == [test_user_anchor["id"]]


async def test_owner_deletes_own_user_anchor(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, test_user_anchor: dict, owner
):
    result = await user_anchor_service.delete_user_anchor(test_user_anchor["id"], owner, db_session)

    assert result.success is True
    assert await count_user_anchors(db_session) == 0


async def test_moderator_deletes_any_user_anchor(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, test_user_anchor: dict, moderator
):
    result = await user_anchor_service.delete_user_anchor(test_user_anchor["id"], moderator, db_session)

    assert result.success is True
    assert await count_user_anchors(db_session) == 0


async def test_other_user_may_not_delete_user_anchor(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, test_user_anchor: dict, other_user
):
    with pytest.raises(PermissionDeniedError, match="You may not delete other users' anchors."):
        await user_anchor_service.delete_user_anchor(test_user_anchor["id"], other_user, db_session)

    assert await count_user_anchors(db_session) == 1


async def test_anonymous_may_not_delete_user_anchor(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, test_user_anchor: dict, anonymous
):
    with pytest.raises(PermissionDeniedError, match="You must be logged in to delete user anchors."):
        await user_anchor_service.delete_user_anchor(test_user_anchor["id"], anonymous, db_session)

    assert await count_user_anchors(db_session) == 1


async def test_delete_missing_user_anchor_is_store_failure(
    user_anchor_service: UserAnchorService, db_session: AsyncSession, owner
):
    with pytest.raises(StoreFailureError):
        await user_anchor_service.delete_user_anchor(99999, owner, db_session)
