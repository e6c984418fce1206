"""SQLAlchemy models for page entities."""

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.session import Base


class Page(Base):
    """A single rendered page of a document.

    Pages are served as images; ``aspect_ratio`` and ``height`` let clients
    lay a page out before the image arrives.
    """

    __tablename__ = "pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    page_number: Mapped[int] = mapped_column(Integer)
    image_path: Mapped[str] = mapped_column(String(1024))
    aspect_ratio: Mapped[float] = mapped_column(Float)
    height: Mapped[int] = mapped_column(Integer)
    document: Mapped[int] = mapped_column(Integer, ForeignKey("documents.id"), index=True)
