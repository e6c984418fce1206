"""Row to wire conversion for anchors."""

from typing import Any, Dict

from ..common.utils.formatting import format_timestamp, text_or_empty
from .schemas import AnchorRead


def anchor_fields(row: Any) -> Dict[str, Any]:
    """Wire fields common to anchors and user anchors."""
    return {
        "id": row.id,
        "title": text_or_empty(row.title),
        "track_time": row.track_time,
        "position_top": row.position_top,
        "position_left": row.position_left,
        "page_id": row.document_page,
        "track_id": row.track,
        "created_at": format_timestamp(row.created_at),
        "updated_at": format_timestamp(row.updated_at),
    }


def to_anchor_read(row: Any) -> AnchorRead:
    return AnchorRead(**anchor_fields(row))
