"""Anchor RPC endpoints."""

from fastapi import APIRouter, Depends

from ....modules.access.schemas import principal_from
from ....modules.anchor.schemas import (
    CreateAnchorRequest,
    CreateAnchorResponse,
    DeleteAnchorRequest,
    GetAnchorsByIDsRequest,
    GetAnchorsByIDsResponse,
    GetAnchorsByPageIDsRequest,
    GetAnchorsByPageIDsResponse,
)
from ....modules.anchor.services import AnchorService
from ....modules.common.schemas import DeleteResponse
from ..dependencies import DbSession, get_anchor_service

router = APIRouter(prefix="/courses", tags=["Anchors"])


@router.post(
    "/GetAnchorsByPageIDs",
    summary="Resolve Anchors for Pages",
    description="""
    Returns the anchors of every requested page in one round trip.

    - **ids**: Page ids to resolve

    The result maps page id to `{"anchors": [...]}`. Pages without anchors
    are left out of the mapping.
    """,
)
async def get_anchors_by_page_ids(
    payload: GetAnchorsByPageIDsRequest,
    db: DbSession,
    service: AnchorService = Depends(get_anchor_service),
) -> GetAnchorsByPageIDsResponse:
    """Group anchors by page."""
    return await service.get_anchors_by_page_ids(payload.ids, db)


@router.post(
    "/GetAnchorsByIDs",
    summary="Resolve Anchors by ID",
    description="Returns the anchors whose ids were requested. Unknown ids are skipped.",
)
async def get_anchors_by_ids(
    payload: GetAnchorsByIDsRequest,
    db: DbSession,
    service: AnchorService = Depends(get_anchor_service),
) -> GetAnchorsByIDsResponse:
    return await service.get_anchors_by_ids(payload.ids, db)


@router.post(
    "/CreateAnchor",
    summary="Create Anchor",
    description="""
    Places a shared anchor linking a spot on a page to a moment in a track.
    Requires a moderator or administrator in **active_user**.
    """,
    responses={
        200: {"description": "Anchor created"},
        403: {"description": "Caller missing or not a moderator/administrator"},
        500: {"description": "Unknown page/track or store failure"},
    },
)
async def create_anchor(
    payload: CreateAnchorRequest,
    db: DbSession,
    service: AnchorService = Depends(get_anchor_service),
) -> CreateAnchorResponse:
    """Create an anchor."""
    return await service.create_anchor(payload, principal_from(payload.active_user), db)


@router.post(
    "/DeleteAnchor",
    summary="Delete Anchor",
    description="Permanently deletes a shared anchor. Requires a moderator or administrator.",
    responses={
        200: {"description": "Anchor deleted"},
        403: {"description": "Caller missing or not a moderator/administrator"},
    },
)
async def delete_anchor(
    payload: DeleteAnchorRequest,
    db: DbSession,
    service: AnchorService = Depends(get_anchor_service),
) -> DeleteResponse:
    return await service.delete_anchor(payload.id, principal_from(payload.active_user), db)
