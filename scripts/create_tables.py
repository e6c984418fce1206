"""Script to create the courses tables from SQLAlchemy models."""

import asyncio
import sys

from courses_service.infrastructure.database.session import create_tables
from courses_service.infrastructure.logging import get_logger
from courses_service.modules.anchor.models import Anchor  # noqa: F401
from courses_service.modules.bookmark.models import Bookmark  # noqa: F401
from courses_service.modules.document.models import Document  # noqa: F401
from courses_service.modules.page.models import Page  # noqa: F401
from courses_service.modules.track.models import Track  # noqa: F401
from courses_service.modules.user_anchor.models import UserAnchor  # noqa: F401

logger = get_logger(__name__)


async def main() -> None:
    """Create database tables."""
    logger.info("Creating database tables...")

    try:
        await create_tables()
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating database tables: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
