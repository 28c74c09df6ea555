"""Infrastructure fixtures — a seeded in-memory store without the HTTP layer."""

import pytest

from newsdesk.db.base import Base
from newsdesk.infrastructure.database import DatabaseSessionManager
from newsdesk.models import Article, Topic, User


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as db:
        db.add(Topic(slug="mitch", description="The man, the Mitch, the legend"))
        db.add(User(username="lurker", name="do_nothing", avatar_url=None))
        await db.flush()
        db.add(Article(
            article_id=1, title="Seed", topic="mitch", author="lurker", body="seed",
        ))
        await db.commit()
        yield db
