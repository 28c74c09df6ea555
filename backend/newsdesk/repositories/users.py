"""User data access."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.infrastructure.database import translate_store_errors
from newsdesk.models.user import User


async def select_users(db: AsyncSession) -> list[User]:
    async with translate_store_errors(db, "select_users"):
        result = await db.execute(select(User).order_by(User.username))
        return list(result.scalars().all())
