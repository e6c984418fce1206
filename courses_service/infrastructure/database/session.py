from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

from ..config.settings import settings

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_size=settings.POSTGRES_POOL_SIZE,
    max_overflow=settings.POSTGRES_MAX_OVERFLOW,
    pool_timeout=settings.POSTGRES_POOL_TIMEOUT,
)

local_session = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase, MappedAsDataclass):
    """Base class for all database models.

    Combines SQLAlchemy's DeclarativeBase with MappedAsDataclass so every
    model gets a generated ``__init__`` built from its mapped columns.
    The engine above is the only process-wide shared resource; sessions
    are cheap and created per request.
    """

    pass


async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency providing one database session per request.

    The session borrows a pooled connection only while a statement runs,
    so concurrent requests contend on the pool, never on the session.

    Yields:
        AsyncSession: A configured async database session.
    """
    async_get_db = local_session
    async with async_get_db() as db:
        yield db


async def create_tables() -> None:
    """Create all tables in the database if they don't exist.

    The production schema is owned by migrations outside this service; this
    is for local development and tests.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
