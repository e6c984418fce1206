"""SQLAlchemy models for bookmark entities."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.session import Base


class Bookmark(Base):
    """A named jump target to a page of a document, curated by moderators."""

    __tablename__ = "bookmarks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    title: Mapped[str] = mapped_column(String(255))
    document_page: Mapped[int] = mapped_column(Integer, ForeignKey("pages.id"), index=True)
    document: Mapped[int] = mapped_column(Integer, ForeignKey("documents.id"), index=True)
