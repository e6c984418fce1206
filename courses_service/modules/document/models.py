"""SQLAlchemy models for document entities."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class Document(Base, TimestampMixin):
    """A course document.

    Documents are the root of the course content tree: pages, audio tracks
    and bookmarks all point back at one document.
    """

    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    title: Mapped[str] = mapped_column(String(255))
