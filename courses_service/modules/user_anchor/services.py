"""User anchor management service."""

from datetime import datetime, timezone
from typing import List, cast

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.logging import get_logger
from ..access import Action, Anonymous, Caller, Principal, authorize
from ..common.batch import fetch_by_ids, fetch_grouped_by_parent
from ..common.schemas import DeleteResponse
from ..common.store import fetch_scalar_one, write, write_returning_one
from .crud import user_anchor_crud
from .mappers import to_user_anchor_read
from .models import UserAnchor
from .schemas import (
    CreateUserAnchorRequest,
    CreateUserAnchorResponse,
    GetUserAnchorsByIDsResponse,
    GetUserAnchorsByPageIDsResponse,
    PageUserAnchors,
)

logger = get_logger(__name__)


class UserAnchorService:
    """Service for private, per-user anchors.

    Any signed-in user may create user anchors and becomes their owner.
    Only the owner, a moderator or an administrator may delete one.
    """

    async def get_user_anchors_by_page_ids(
        self,
        page_ids: List[int],
        db: AsyncSession,
    ) -> GetUserAnchorsByPageIDsResponse:
        """Get the user anchors of several pages in one query.

        Returns:
            User anchors keyed by page id; pages with none are absent
        """
        grouped = await fetch_grouped_by_parent(db, user_anchor_crud, "document_page", page_ids, to_user_anchor_read)
        return GetUserAnchorsByPageIDsResponse(
            user_anchors={page_id: PageUserAnchors(user_anchors=anchors) for page_id, anchors in grouped.items()}
        )

    async def get_user_anchors_by_ids(
        self,
        ids: List[int],
        db: AsyncSession,
    ) -> GetUserAnchorsByIDsResponse:
        rows = await fetch_by_ids(db, user_anchor_crud, ids)
        return GetUserAnchorsByIDsResponse(user_anchors=[to_user_anchor_read(row) for row in rows])

    async def create_user_anchor(
        self,
        anchor_data: CreateUserAnchorRequest,
        principal: Principal,
        db: AsyncSession,
    ) -> CreateUserAnchorResponse:
        """Create a user anchor owned by the caller.

        Raises:
            PermissionDeniedError: If the request carries no caller
            StoreFailureError: If the page or track does not exist
        """
        caller = cast(Caller, authorize(Action.CREATE_USER_ANCHOR, principal))

        now = datetime.now(timezone.utc)
        stmt = (
            insert(UserAnchor)
            .values(
                title=anchor_data.title,
                track_time=anchor_data.track_time,
                position_top=anchor_data.position_top,
                position_left=anchor_data.position_left,
                document_page=anchor_data.page_id,
                track=anchor_data.track_id,
                owning_user=caller.id,
                created_at=now,
                updated_at=now,
            )
            .returning(*UserAnchor.__table__.c)
        )
        row = await write_returning_one(db, stmt)

        logger.info(
            f"User anchor {row.id} created",
            extra={"user_anchor_id": row.id, "owner": caller.id, "page_id": row.document_page},
        )
        return CreateUserAnchorResponse(user_anchor=to_user_anchor_read(row))

    async def delete_user_anchor(
        self,
        anchor_id: int,
        principal: Principal,
        db: AsyncSession,
    ) -> DeleteResponse:
        """Delete a user anchor after checking ownership.

        The owner is read first and the delete runs as a separate statement;
        the two are not one atomic unit. Ownership never changes after
        creation, so the gap cannot hand the row to someone else.

        Raises:
            PermissionDeniedError: If the caller is anonymous, or neither the
                owner nor a moderator/administrator
            StoreFailureError: If no user anchor has this id
        """
        # Anonymous callers are turned away before the ownership lookup.
        if isinstance(principal, Anonymous):
            authorize(Action.DELETE_USER_ANCHOR, principal)

        owner = await fetch_scalar_one(db, select(UserAnchor.owning_user).where(UserAnchor.id == anchor_id))
        authorize(Action.DELETE_USER_ANCHOR, principal, owner=owner)

        await write(db, delete(UserAnchor).where(UserAnchor.id == anchor_id))

        logger.info(f"User anchor {anchor_id} deleted", extra={"user_anchor_id": anchor_id, "owner": owner})
        return DeleteResponse(success=True)
