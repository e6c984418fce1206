"""Row-to-wire conversions shared by every entity mapper."""

from datetime import datetime, timezone
from typing import Optional


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as RFC 3339 text in UTC.

    Naive values are taken to already be UTC; some stores (SQLite) drop the
    offset on the way back.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def text_or_empty(value: Optional[str]) -> str:
    return value if value is not None else ""
