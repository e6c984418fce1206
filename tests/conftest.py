"""Test configuration and fixtures for the courses service."""

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# mypy: disable-error-code="import-untyped"
from testcontainers.core.docker_client import DockerClient
from testcontainers.postgres import PostgresContainer

from courses_service.infrastructure.database.session import Base, async_session
from courses_service.infrastructure.logging.config import configure_testing_logging
from courses_service.interfaces.main import app
from courses_service.modules.access import ANONYMOUS, Authenticated, Caller, UserRole
from courses_service.modules.anchor.models import Anchor
from courses_service.modules.bookmark.models import Bookmark
from courses_service.modules.document.models import Document
from courses_service.modules.page.models import Page
from courses_service.modules.track.models import Track
from courses_service.modules.user_anchor.models import UserAnchor

configure_testing_logging()

MODERATOR_ID = 100
OWNER_ID = 200
OTHER_USER_ID = 300


def is_docker_running() -> bool:
    """Check if Docker daemon is running."""
    try:
        DockerClient()
        return True
    except Exception:
        return False


@pytest.fixture(scope="session")
def pg_container():
    """PostgreSQL container shared by the session, or None without Docker."""
    if not is_docker_running():
        yield None
        return

    with PostgresContainer("postgres:16-alpine") as pg:
        yield pg


@pytest.fixture
def test_db_url(pg_container, tmp_path):
    """asyncpg URL of the container, or a throwaway SQLite file without Docker."""
    if pg_container is None:
        return f"sqlite+aiosqlite:///{tmp_path / 'courses.db'}"

    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return (
        f"postgresql+asyncpg://{pg_container.username}:{pg_container.password}"
        f"@{host}:{port}/{pg_container.dbname}"
    )


@pytest_asyncio.fixture
async def test_db_engine(test_db_url):
    """Create a SQLAlchemy engine with a fresh schema for one test."""
    engine = create_async_engine(test_db_url, echo=False)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_db_engine):
    """Create a test client where every request gets its own session."""
    app.dependency_overrides = {}

    test_session_factory = async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[async_session] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


# Principals


@pytest.fixture
def anonymous():
    return ANONYMOUS


@pytest.fixture
def moderator():
    return Authenticated(Caller(id=MODERATOR_ID, role=UserRole.MODERATOR))


@pytest.fixture
def owner():
    return Authenticated(Caller(id=OWNER_ID))


@pytest.fixture
def other_user():
    return Authenticated(Caller(id=OTHER_USER_ID))


# Course content


@pytest_asyncio.fixture
async def test_document(db_session: AsyncSession):
    """Create a test document."""
    document = Document(title="Organic Chemistry I")
    db_session.add(document)
    await db_session.commit()
    return {"id": document.id, "title": document.title}


@pytest_asyncio.fixture
async def test_document_2(db_session: AsyncSession):
    """Create a second test document."""
    document = Document(title="Linear Algebra")
    db_session.add(document)
    await db_session.commit()
    return {"id": document.id, "title": document.title}


@pytest_asyncio.fixture
async def test_pages(db_session: AsyncSession, test_document: dict):
    """Create three pages of the test document."""
    pages = [
        Page(
            page_number=number,
            image_path=f"/documents/{test_document['id']}/page-{number}.png",
            aspect_ratio=0.707,
            height=1400,
            document=test_document["id"],
        )
        for number in (1, 2, 3)
    ]
    db_session.add_all(pages)
    await db_session.commit()
    return [{"id": page.id, "page_number": page.page_number, "document_id": page.document} for page in pages]


@pytest_asyncio.fixture
async def test_tracks(db_session: AsyncSession, test_document: dict):
    """Create two audio tracks of the test document."""
    tracks = [
        Track(
            track_number=number,
            title=f"Lecture {number}",
            audio_path=f"/documents/{test_document['id']}/track-{number}.mp3",
            document=test_document["id"],
        )
        for number in (1, 2)
    ]
    db_session.add_all(tracks)
    await db_session.commit()
    return [{"id": track.id, "title": track.title, "document_id": track.document} for track in tracks]


@pytest_asyncio.fixture
async def test_bookmark(db_session: AsyncSession, test_document: dict, test_pages: list):
    """Create a bookmark on the first page."""
    bookmark = Bookmark(title="Chapter 1", document_page=test_pages[0]["id"], document=test_document["id"])
    db_session.add(bookmark)
    await db_session.commit()
    return {"id": bookmark.id, "title": bookmark.title, "page_id": bookmark.document_page}


@pytest_asyncio.fixture
async def test_anchors(db_session: AsyncSession, test_pages: list, test_tracks: list):
    """Create two anchors on page 1, one on page 2 and none on page 3."""
    now = datetime.now(timezone.utc)
    placements = [(test_pages[0]["id"], 1.5, "Intro"), (test_pages[0]["id"], 42.0, None), (test_pages[1]["id"], 90.0, "Proof")]
    anchors = [
        Anchor(
            track_time=track_time,
            position_top=0.25,
            position_left=0.5,
            document_page=page_id,
            track=test_tracks[0]["id"],
            created_at=now,
            updated_at=now,
            title=title,
        )
        for page_id, track_time, title in placements
    ]
    db_session.add_all(anchors)
    await db_session.commit()
    return [{"id": anchor.id, "page_id": anchor.document_page, "title": anchor.title} for anchor in anchors]


@pytest_asyncio.fixture
async def test_user_anchor(db_session: AsyncSession, test_pages: list, test_tracks: list):
    """Create a user anchor owned by OWNER_ID on page 1."""
    now = datetime.now(timezone.utc)
    user_anchor = UserAnchor(
        track_time=12.0,
        position_top=0.1,
        position_left=0.9,
        document_page=test_pages[0]["id"],
        track=test_tracks[1]["id"],
        owning_user=OWNER_ID,
        created_at=now,
        updated_at=now,
        title="Remember this",
    )
    db_session.add(user_anchor)
    await db_session.commit()
    return {"id": user_anchor.id, "page_id": user_anchor.document_page, "owner": user_anchor.owning_user}
