from fastapi import APIRouter

from .anchors import router as anchor_router
from .bookmarks import router as bookmark_router
from .documents import router as document_router
from .pages import router as page_router
from .tracks import router as track_router
from .user_anchors import router as user_anchor_router

router = APIRouter(prefix="/v1")
router.include_router(document_router)
router.include_router(page_router)
router.include_router(track_router)
router.include_router(bookmark_router)
router.include_router(anchor_router)
router.include_router(user_anchor_router)


@router.get(
    "/health",
    summary="API Health Check",
    description="Simple health check endpoint for monitoring and container orchestration.",
    responses={
        200: {"description": "API is healthy and responding"},
    },
)
async def health_check():
    """Health check endpoint for Docker health checks."""
    return {"status": "healthy", "message": "Courses service is running"}
