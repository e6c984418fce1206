"""SQLAlchemy models for track entities."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.session import Base


class Track(Base):
    """An audio track recorded for a document.

    Only ``title`` may be changed after the track is stored.
    """

    __tablename__ = "tracks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    track_number: Mapped[int] = mapped_column(Integer)
    title: Mapped[str] = mapped_column(String(255))
    audio_path: Mapped[str] = mapped_column(String(1024))
    document: Mapped[int] = mapped_column(Integer, ForeignKey("documents.id"), index=True)
