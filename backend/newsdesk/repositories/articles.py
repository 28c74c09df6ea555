"""Article data access — list with filter/sort, fetch by id, vote delta.

Invariants:
    - comment_count comes from an OUTER JOIN + COUNT grouped by article_id,
      so articles without comments report 0
    - Sort column names are resolved only through _SORT_COLUMNS; the
      allow-list itself lives in core/article_queries.py
    - Vote updates are a single UPDATE ... SET votes = votes + :inc RETURNING
"""

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.core.article_queries import ArticleListQuery
from newsdesk.core.domain_types import ArticleId, SortOrder
from newsdesk.infrastructure.database import translate_store_errors
from newsdesk.models.article import Article
from newsdesk.models.comment import Comment

ArticleWithCount = tuple[Article, int]

_comment_count = func.count(Comment.comment_id).label("comment_count")

_SORT_COLUMNS = {
    "article_id": Article.article_id,
    "title": Article.title,
    "topic": Article.topic,
    "author": Article.author,
    "created_at": Article.created_at,
    "votes": Article.votes,
    "comment_count": _comment_count,
}


def _select_articles_with_count():
    return (
        select(Article, _comment_count)
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .group_by(Article.article_id)
    )


async def select_articles(
    db: AsyncSession, query: ArticleListQuery,
) -> list[ArticleWithCount]:
    """All articles matching query.topic, ordered by query.sort_by/query.order."""
    stmt = _select_articles_with_count()
    if query.topic is not None:
        stmt = stmt.where(Article.topic == query.topic)

    column = _SORT_COLUMNS[query.sort_by]
    direction = column.asc() if query.order is SortOrder.ASC else column.desc()
    stmt = stmt.order_by(direction, Article.article_id.asc())

    async with translate_store_errors(db, "select_articles"):
        result = await db.execute(stmt)
        return [(article, count) for article, count in result.all()]


async def select_article_by_id(
    db: AsyncSession, article_id: ArticleId,
) -> ArticleWithCount | None:
    stmt = _select_articles_with_count().where(Article.article_id == article_id)
    async with translate_store_errors(db, "select_article_by_id"):
        row = (await db.execute(stmt)).one_or_none()
    if row is None:
        return None
    article, count = row
    return article, count


async def article_exists(db: AsyncSession, article_id: ArticleId) -> bool:
    stmt = select(Article.article_id).where(Article.article_id == article_id)
    async with translate_store_errors(db, "article_exists"):
        result = await db.execute(stmt)
        return result.scalar_one_or_none() is not None


async def update_article_votes(
    db: AsyncSession, article_id: ArticleId, inc_votes: int,
) -> Article | None:
    """Apply a vote delta atomically; None when no article has this id."""
    stmt = (
        update(Article)
        .where(Article.article_id == article_id)
        .values(votes=Article.votes + inc_votes)
        .returning(Article)
    )
    async with translate_store_errors(db, "update_article_votes"):
        result = await db.execute(stmt)
        article = result.scalar_one_or_none()
        await db.commit()
    return article
