"""FastAPI dependencies for use in API endpoints."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.database import async_session
from ...modules.anchor.services import AnchorService
from ...modules.bookmark.services import BookmarkService
from ...modules.document.services import DocumentService
from ...modules.page.services import PageService
from ...modules.track.services import TrackService
from ...modules.user_anchor.services import UserAnchorService

DbSession = Annotated[AsyncSession, Depends(async_session)]


def get_document_service() -> DocumentService:
    """Dependency for providing a DocumentService instance."""
    return DocumentService()


def get_page_service() -> PageService:
    """Dependency for providing a PageService instance."""
    return PageService()


def get_track_service() -> TrackService:
    """Dependency for providing a TrackService instance."""
    return TrackService()


def get_bookmark_service() -> BookmarkService:
    """Dependency for providing a BookmarkService instance."""
    return BookmarkService()


def get_anchor_service() -> AnchorService:
    """Dependency for providing an AnchorService instance."""
    return AnchorService()


def get_user_anchor_service() -> UserAnchorService:
    """Dependency for providing a UserAnchorService instance."""
    return UserAnchorService()
