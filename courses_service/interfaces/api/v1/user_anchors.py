"""User anchor RPC endpoints."""

from fastapi import APIRouter, Depends

from ....modules.access.schemas import principal_from
from ....modules.common.schemas import DeleteResponse
from ....modules.user_anchor.schemas import (
    CreateUserAnchorRequest,
    CreateUserAnchorResponse,
    DeleteUserAnchorRequest,
    GetUserAnchorsByIDsRequest,
    GetUserAnchorsByIDsResponse,
    GetUserAnchorsByPageIDsRequest,
    GetUserAnchorsByPageIDsResponse,
)
from ....modules.user_anchor.services import UserAnchorService
from ..dependencies import DbSession, get_user_anchor_service

router = APIRouter(prefix="/courses", tags=["User Anchors"])


@router.post(
    "/GetUserAnchorsByPageIDs",
    summary="Resolve User Anchors for Pages",
    description="""
    Returns the user anchors of every requested page in one round trip.

    - **ids**: Page ids to resolve

    Pages without user anchors are left out of the mapping.
    """,
)
async def get_user_anchors_by_page_ids(
    payload: GetUserAnchorsByPageIDsRequest,
    db: DbSession,
    service: UserAnchorService = Depends(get_user_anchor_service),
) -> GetUserAnchorsByPageIDsResponse:
    return await service.get_user_anchors_by_page_ids(payload.ids, db)


@router.post(
    "/GetUserAnchorsByIDs",
    summary="Resolve User Anchors by ID",
    description="Returns the user anchors whose ids were requested. Unknown ids are skipped.",
)
async def get_user_anchors_by_ids(
    payload: GetUserAnchorsByIDsRequest,
    db: DbSession,
    service: UserAnchorService = Depends(get_user_anchor_service),
) -> GetUserAnchorsByIDsResponse:
    return await service.get_user_anchors_by_ids(payload.ids, db)


@router.post(
    "/CreateUserAnchor",
    summary="Create User Anchor",
    description="""
    Places a private anchor owned by the signed-in caller. Any authenticated
    user may create one.
    """,
    responses={
        200: {"description": "User anchor created"},
        403: {"description": "No caller in the request"},
        500: {"description": "Unknown page/track or store failure"},
    },
)
async def create_user_anchor(
    payload: CreateUserAnchorRequest,
    db: DbSession,
    service: UserAnchorService = Depends(get_user_anchor_service),
) -> CreateUserAnchorResponse:
    """Create a user anchor owned by the caller."""
    return await service.create_user_anchor(payload, principal_from(payload.active_user), db)


@router.post(
    "/DeleteUserAnchor",
    summary="Delete User Anchor",
    description="""
    Deletes a user anchor. Allowed for its owner and for moderators and
    administrators. Deleting an id that does not exist is a store failure.
    """,
    responses={
        200: {"description": "User anchor deleted"},
        403: {"description": "Caller missing, or neither owner nor moderator"},
        500: {"description": "User anchor not found or store failure"},
    },
)
async def delete_user_anchor(
    payload: DeleteUserAnchorRequest,
    db: DbSession,
    service: UserAnchorService = Depends(get_user_anchor_service),
) -> DeleteResponse:
    """Delete a user anchor after checking ownership."""
    return await service.delete_user_anchor(payload.id, principal_from(payload.active_user), db)
