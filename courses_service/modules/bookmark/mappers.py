"""Row to wire conversion for bookmarks."""

from typing import Any

from .schemas import BookmarkRead


def to_bookmark_read(row: Any) -> BookmarkRead:
    return BookmarkRead(
        id=row.id,
        title=row.title,
        page_id=row.document_page,
        document_id=row.document,
    )
