"""Row to wire conversion for pages."""

from typing import Any

from .schemas import PageRead


def to_page_read(row: Any) -> PageRead:
    return PageRead(
        id=row.id,
        page_number=row.page_number,
        image_path=row.image_path,
        aspect_ratio=row.aspect_ratio,
        height=row.height,
        document_id=row.document,
    )
