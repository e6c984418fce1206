"""Anchor management service."""

from datetime import datetime, timezone
from typing import List

from sqlalchemy import delete, insert
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.logging import get_logger
from ..access import Action, Principal, authorize
from ..common.batch import fetch_by_ids, fetch_grouped_by_parent
from ..common.schemas import DeleteResponse
from ..common.store import write, write_returning_one
from .crud import anchor_crud
from .mappers import to_anchor_read
from .models import Anchor
from .schemas import (
    CreateAnchorRequest,
    CreateAnchorResponse,
    GetAnchorsByIDsResponse,
    GetAnchorsByPageIDsResponse,
    PageAnchors,
)

logger = get_logger(__name__)


class AnchorService:
    """Service for page anchors shared with every reader.

    Provides grouped lookup by page for the aggregation layer, flat lookup
    by id, and moderator-only creation and deletion.
    """

    async def get_anchors_by_page_ids(
        self,
        page_ids: List[int],
        db: AsyncSession,
    ) -> GetAnchorsByPageIDsResponse:
        """Get the anchors of several pages in one query.

        Args:
            page_ids: Pages to resolve
            db: Database session

        Returns:
            Anchors keyed by page id; pages with no anchors are absent
        """
        grouped = await fetch_grouped_by_parent(db, anchor_crud, "document_page", page_ids, to_anchor_read)
        return GetAnchorsByPageIDsResponse(
            anchors={page_id: PageAnchors(anchors=anchors) for page_id, anchors in grouped.items()}
        )

    async def get_anchors_by_ids(
        self,
        ids: List[int],
        db: AsyncSession,
    ) -> GetAnchorsByIDsResponse:
        rows = await fetch_by_ids(db, anchor_crud, ids)
        return GetAnchorsByIDsResponse(anchors=[to_anchor_read(row) for row in rows])

    async def create_anchor(
        self,
        anchor_data: CreateAnchorRequest,
        principal: Principal,
        db: AsyncSession,
    ) -> CreateAnchorResponse:
        """Create an anchor.

        ``created_at`` and ``updated_at`` are taken from one clock reading so
        they are identical on the new row.

        Raises:
            PermissionDeniedError: If the caller is not a moderator or administrator
            StoreFailureError: If the page or track does not exist
        """
        authorize(Action.CREATE_ANCHOR, principal)

        now = datetime.now(timezone.utc)
        stmt = (
            insert(Anchor)
            .values(
                title=anchor_data.title,
                track_time=anchor_data.track_time,
                position_top=anchor_data.position_top,
                position_left=anchor_data.position_left,
                document_page=anchor_data.page_id,
                track=anchor_data.track_id,
                created_at=now,
                updated_at=now,
            )
            .returning(*Anchor.__table__.c)
        )
        row = await write_returning_one(db, stmt)

        logger.info(f"Anchor {row.id} created", extra={"anchor_id": row.id, "page_id": row.document_page})
        return CreateAnchorResponse(anchor=to_anchor_read(row))

    async def delete_anchor(
        self,
        anchor_id: int,
        principal: Principal,
        db: AsyncSession,
    ) -> DeleteResponse:
        """Delete an anchor. Deleting an id that does not exist still succeeds."""
        authorize(Action.DELETE_ANCHOR, principal)

        await write(db, delete(Anchor).where(Anchor.id == anchor_id))

        logger.info(f"Anchor {anchor_id} deleted", extra={"anchor_id": anchor_id})
        return DeleteResponse(success=True)
