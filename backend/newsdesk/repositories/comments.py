"""Comment data access — list by article, insert, delete."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.core.domain_types import ArticleId, CommentId, Username
from newsdesk.infrastructure.database import translate_store_errors
from newsdesk.models.comment import Comment


async def select_comments_by_article_id(
    db: AsyncSession, article_id: ArticleId,
) -> list[Comment]:
    """Newest first."""
    stmt = (
        select(Comment)
        .where(Comment.article_id == article_id)
        .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
    )
    async with translate_store_errors(db, "select_comments_by_article_id"):
        result = await db.execute(stmt)
        return list(result.scalars().all())


async def insert_comment(
    db: AsyncSession, article_id: ArticleId, username: Username, body: str,
) -> Comment:
    """Insert a comment; FK violations for article or author surface as RELATED_RESOURCE_MISSING."""
    comment = Comment(body=body, author=username, article_id=article_id)
    async with translate_store_errors(db, "insert_comment"):
        db.add(comment)
        await db.commit()
    return comment


async def delete_comment_by_id(db: AsyncSession, comment_id: CommentId) -> bool:
    """True when a row was removed."""
    stmt = delete(Comment).where(Comment.comment_id == comment_id)
    async with translate_store_errors(db, "delete_comment_by_id"):
        result = await db.execute(stmt)
        deleted = result.rowcount
        await db.commit()
    return deleted > 0
