"""Row to wire conversion for user anchors."""

from typing import Any

from ..anchor.mappers import anchor_fields
from .schemas import UserAnchorRead


def to_user_anchor_read(row: Any) -> UserAnchorRead:
    return UserAnchorRead(**anchor_fields(row), owner=row.owning_user)
