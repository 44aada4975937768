from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from folio.core.celery_app import celery_app
from folio.core.config import settings
from folio.core.security import create_admin_session_token
from folio.db.base import Base
from folio.db.session import get_db
from folio.main import app
from folio.services.bad_words import set_bad_words
from folio.services.tweet_store import SqlTweetStore

TEST_BAD_WORDS = ["spam", "scam", "badword", "fraud"]


@pytest.fixture(autouse=True)
def bad_words():
    set_bad_words(TEST_BAD_WORDS)
    yield TEST_BAD_WORDS
    set_bad_words(None)


@pytest.fixture(autouse=True)
def eager_celery():
    celery_app.conf.task_always_eager = True
    yield
    celery_app.conf.task_always_eager = False


@pytest.fixture(autouse=True)
def secrets_config(monkeypatch):
    monkeypatch.setattr(settings, "MODERATION_ADMIN_KEY", "mod-key")
    monkeypatch.setattr(settings, "INTERNAL_API_KEY", "internal-key")
    monkeypatch.setattr(settings, "RESEND_API_KEY", "")


@pytest.fixture
async def session_maker() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    await engine.dispose()


@pytest.fixture
async def db(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
def store(db) -> SqlTweetStore:
    return SqlTweetStore(db)


@pytest.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="https://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Cookie": f"{settings.ADMIN_SESSION_COOKIE}={create_admin_session_token()}"}
