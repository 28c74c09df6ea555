"""API test fixtures — isolated in-memory store, seeded data, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with FK enforcement on
    - Every test gets its own app from create_app(db_manager=...); no
      dependency overrides or module-level state to restore
    - Seed data is small and fixed so ordering/count assertions are exact

Seeded articles by created_at (newest first): 3, 6, 2, 5, 1, 4
Comment counts: article 1 → 4, article 3 → 2, article 5 → 1, others → 0
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from newsdesk.config import Settings
from newsdesk.db.base import Base
from newsdesk.infrastructure.database import DatabaseSessionManager
from newsdesk.main import create_app
from newsdesk.models import Article, Comment, Topic, User


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


TOPICS = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS = [
    {"username": "butter_bridge", "name": "jonny",
     "avatar_url": "https://example.com/avatars/butter_bridge.jpg"},
    {"username": "icellusedkars", "name": "sam",
     "avatar_url": "https://example.com/avatars/icellusedkars.jpg"},
    {"username": "rogersop", "name": "paul",
     "avatar_url": "https://example.com/avatars/rogersop.jpg"},
    {"username": "lurker", "name": "do_nothing",
     "avatar_url": "https://example.com/avatars/lurker.jpg"},
]

ARTICLES = [
    {"article_id": 1, "title": "Living in the shadow of a great man",
     "topic": "mitch", "author": "butter_bridge",
     "body": "I find this existence challenging",
     "created_at": _utc(2020, 7, 9, 20, 11), "votes": 100},
    {"article_id": 2, "title": "Sony Vaio; or, The Laptop",
     "topic": "mitch", "author": "icellusedkars",
     "body": "Call me Mitchell.",
     "created_at": _utc(2020, 10, 16, 5, 3), "votes": 0},
    {"article_id": 3, "title": "Eight pug gifs that remind me of mitch",
     "topic": "mitch", "author": "icellusedkars",
     "body": "some gifs",
     "created_at": _utc(2020, 11, 3, 9, 12), "votes": 0},
    {"article_id": 4, "title": "Student SUES Mitch!",
     "topic": "mitch", "author": "rogersop",
     "body": "We all love Mitch and his wonderful, unique typing style.",
     "created_at": _utc(2020, 5, 6, 1, 14), "votes": 0},
    {"article_id": 5, "title": "UNCOVERED: catspiracy to bring down democracy",
     "topic": "cats", "author": "rogersop",
     "body": "Bastet walks amongst us, and the cats are taking arms!",
     "created_at": _utc(2020, 8, 3, 13, 14), "votes": 0},
    {"article_id": 6, "title": "A",
     "topic": "mitch", "author": "icellusedkars",
     "body": "Delicious tin of cat food",
     "created_at": _utc(2020, 10, 18, 1, 0), "votes": 0},
]

COMMENTS = [
    {"comment_id": 1, "article_id": 1, "author": "butter_bridge",
     "body": "Oh, I've got compassion running out of my nose, pal!",
     "votes": 16, "created_at": _utc(2020, 4, 6, 12, 17)},
    {"comment_id": 2, "article_id": 1, "author": "icellusedkars",
     "body": "The beautiful thing about treasure is that it exists.",
     "votes": 14, "created_at": _utc(2020, 10, 31, 3, 3)},
    {"comment_id": 3, "article_id": 1, "author": "icellusedkars",
     "body": "Replacing the quiet elegance of the dark suit and tie.",
     "votes": 100, "created_at": _utc(2020, 3, 1, 1, 13)},
    {"comment_id": 4, "article_id": 1, "author": "lurker",
     "body": "I carry a log. Yes. Is it funny to you?",
     "votes": -100, "created_at": _utc(2020, 2, 23, 12, 1)},
    {"comment_id": 5, "article_id": 3, "author": "icellusedkars",
     "body": "Lobster pot",
     "votes": 0, "created_at": _utc(2020, 5, 15, 20, 19)},
    {"comment_id": 6, "article_id": 3, "author": "butter_bridge",
     "body": "git push origin master",
     "votes": 0, "created_at": _utc(2020, 6, 20, 7, 24)},
    {"comment_id": 7, "article_id": 5, "author": "rogersop",
     "body": "This morning, I showered for nine minutes.",
     "votes": 16, "created_at": _utc(2020, 7, 21, 0, 20)},
]


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await manager.close()


@pytest.fixture
async def seeded(db_manager):
    """Insert the fixed topic/user/article/comment dataset."""
    async with db_manager.session() as db:
        db.add_all([Topic(**t) for t in TOPICS])
        db.add_all([User(**u) for u in USERS])
        await db.flush()
        db.add_all([Article(**a) for a in ARTICLES])
        await db.flush()
        db.add_all([Comment(**c) for c in COMMENTS])
        await db.commit()
    return db_manager


@pytest.fixture
async def test_db(seeded):
    async with seeded.session() as session:
        yield session


@pytest.fixture
def app(seeded):
    settings = Settings(
        database_url="sqlite+aiosqlite:///:memory:", log_format="text",
    )
    return create_app(settings, db_manager=seeded)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the seeded store."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
