"""Row to wire conversion for tracks."""

from typing import Any

from .schemas import TrackRead


def to_track_read(row: Any) -> TrackRead:
    return TrackRead(
        id=row.id,
        track_number=row.track_number,
        title=row.title,
        audio_path=row.audio_path,
        document_id=row.document,
    )
