"""Topic data access."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.infrastructure.database import translate_store_errors
from newsdesk.models.topic import Topic


async def select_topics(db: AsyncSession) -> list[Topic]:
    async with translate_store_errors(db, "select_topics"):
        result = await db.execute(select(Topic).order_by(Topic.slug))
        return list(result.scalars().all())
