"""Row to wire conversion for documents."""

from typing import Any

from ..common.utils.formatting import format_timestamp
from .schemas import DocumentRead


def to_document_read(row: Any) -> DocumentRead:
    return DocumentRead(
        id=row.id,
        title=row.title,
        created_at=format_timestamp(row.created_at),
        updated_at=format_timestamp(row.updated_at),
    )
