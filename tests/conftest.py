import itertools
import os
from datetime import datetime, timedelta, timezone

# Settings are read once at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("ADMIN_PASSWORD", "test-moderator-secret")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from swipefeed.api.dependencies.database import get_db
from swipefeed.api.main import app
from swipefeed.shared.models import Base, Genre, GenreCategory, Listing, ModerationStatus
from swipefeed.shared.services.auth_service import AuthService


MODERATOR_PASSWORD = os.environ["ADMIN_PASSWORD"]
BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def async_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(async_engine):
    session_factory = async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
async def taxonomy(db_session: AsyncSession) -> dict[str, Genre]:
    """
    Seed catalog:

        Scene (10):   Outdoor (10), Office (20), Retired (5, inactive)
        Style (20):   Comedy (10), Drama (10)
        Archive (30): no genres
    """
    db_session.add_all(
        [
            GenreCategory(id=1, name="Scene", sort_order=10),
            GenreCategory(id=2, name="Style", sort_order=20),
            GenreCategory(id=3, name="Archive", sort_order=30),
        ]
    )
    genres = [
        Genre(id=1, genre_category_id=1, name="Office", is_active=True, sort_order=20),
        Genre(id=2, genre_category_id=1, name="Outdoor", is_active=True, sort_order=10),
        Genre(id=3, genre_category_id=2, name="Comedy", is_active=True, sort_order=10),
        Genre(id=4, genre_category_id=2, name="Drama", is_active=True, sort_order=10),
        Genre(id=5, genre_category_id=1, name="Retired", is_active=False, sort_order=5),
    ]
    db_session.add_all(genres)
    await db_session.commit()
    return {genre.name: genre for genre in genres}


@pytest.fixture
def make_listing(db_session: AsyncSession):
    """Insert a listing directly, in any state, one minute after the previous one."""
    counter = itertools.count()

    async def _make(status: ModerationStatus = ModerationStatus.PENDING, **fields) -> Listing:
        n = next(counter)
        values = {
            "creator_name": f"creator {n}",
            "title": f"video {n}",
            "video_url": f"https://www.youtube.com/embed/video{n:04d}?autoplay=0&mute=0",
            "status": status,
            "created_at": BASE_TIME + timedelta(minutes=n),
        }
        values.update(fields)
        listing = Listing(**values)
        db_session.add(listing)
        await db_session.commit()
        return listing

    return _make


@pytest.fixture
async def client(db_session: AsyncSession):
    """HTTP client that uses the test DB session via dependency override."""

    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def moderator_headers() -> dict[str, str]:
    token, _ = AuthService().open_moderator_session(MODERATOR_PASSWORD, name="tester")
    return {"Authorization": f"Bearer {token}"}
