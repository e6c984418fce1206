"""SQLAlchemy models for user anchor entities."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.session import Base


class UserAnchor(Base):
    """A private anchor belonging to a single user.

    ``owning_user`` is the id issued by the identity service. It is set from
    the caller on creation and never changes.
    """

    __tablename__ = "user_anchors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    track_time: Mapped[float] = mapped_column(Float)
    position_top: Mapped[float] = mapped_column(Float)
    position_left: Mapped[float] = mapped_column(Float)
    document_page: Mapped[int] = mapped_column(Integer, ForeignKey("pages.id"), index=True)
    track: Mapped[int] = mapped_column(Integer, ForeignKey("tracks.id"), index=True)
    owning_user: Mapped[int] = mapped_column(Integer, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    title: Mapped[Optional[str]] = mapped_column(Text, default=None)
