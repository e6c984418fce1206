"""SQLAlchemy models for anchor entities."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.session import Base


class Anchor(Base):
    """A point on a page tied to a moment in an audio track.

    Anchors are curated by moderators and shown to every reader. The
    service stamps ``created_at`` and ``updated_at`` with the same instant
    when the anchor is created; nothing updates an anchor afterwards.
    """

    __tablename__ = "anchors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    track_time: Mapped[float] = mapped_column(Float)
    position_top: Mapped[float] = mapped_column(Float)
    position_left: Mapped[float] = mapped_column(Float)
    document_page: Mapped[int] = mapped_column(Integer, ForeignKey("pages.id"), index=True)
    track: Mapped[int] = mapped_column(Integer, ForeignKey("tracks.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    title: Mapped[Optional[str]] = mapped_column(Text, default=None)
