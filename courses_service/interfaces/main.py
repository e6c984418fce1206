from ..infrastructure.app_factory import create_application
from ..infrastructure.config.settings import get_settings
from ..interfaces.api import router as api_router

settings = get_settings()

app = create_application(
    router=api_router,
    settings=settings,
    title="Courses API",
    summary="RPC API for course documents and their annotations",
    description="""
    # Courses API

    Every operation is an RPC invoked as `POST /api/v1/courses/<Name>` with a
    JSON body and answered with a JSON envelope.

    * **Documents, pages, tracks**: paged listings and batch lookup by id
    * **Bookmarks and anchors**: shared annotations, managed by moderators
    * **User anchors**: private annotations owned by the user who made them

    ## Access

    Reads are open. Writes carry the caller in `active_user`; requests
    without one are treated as anonymous.
    """,
    version=settings.VERSION,
)
