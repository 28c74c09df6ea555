"""Articles Route — list with filter/sort, fetch by id, vote update.

Invariants:
    - Query-string rules (allow-list, order values) live in core/article_queries.py
    - A missing article on fetch or update is ArticleNotFoundError, which
      names the requested id in its message
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.params import ArticleIdPath
from newsdesk.core.article_queries import build_article_list_query
from newsdesk.core.domain_types import ArticleId
from newsdesk.core.errors import ArticleNotFoundError
from newsdesk.infrastructure.database import get_db
from newsdesk.repositories.articles import (
    select_article_by_id, select_articles, update_article_votes,
)
from newsdesk.schemas.article import (
    ArticleDetail,
    ArticleDetailResponse,
    ArticleListResponse,
    ArticleResponse,
    ArticleSummary,
    ArticleUpdatedResponse,
    ArticleVoteUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.get("", response_model=ArticleListResponse)
async def get_articles(
    sort_by: str | None = Query(None),
    order: str | None = Query(None),
    topic: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Serves an array of all articles with comment_count, newest first by default."""
    query = build_article_list_query(sort_by=sort_by, order=order, topic=topic)
    rows = await select_articles(db, query)
    return ArticleListResponse(
        articles=[ArticleSummary.from_row(a, count) for a, count in rows],
    )


@router.get("/{article_id}", response_model=ArticleDetailResponse)
async def get_article_by_id(
    article_id: ArticleIdPath, db: AsyncSession = Depends(get_db),
):
    """Serves a single article, including its comment_count."""
    row = await select_article_by_id(db, ArticleId(article_id))
    if row is None:
        raise ArticleNotFoundError(article_id)
    article, count = row
    return ArticleDetailResponse(article=ArticleDetail.from_row(article, count))


@router.patch("/{article_id}", response_model=ArticleUpdatedResponse)
async def patch_article_by_id(
    article_id: ArticleIdPath,
    vote_update: ArticleVoteUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Adjusts an article's votes by inc_votes and serves the updated article."""
    article = await update_article_votes(
        db, ArticleId(article_id), vote_update.inc_votes,
    )
    if article is None:
        raise ArticleNotFoundError(article_id)
    logger.info(f"Article {article_id} votes adjusted by {vote_update.inc_votes}")
    return ArticleUpdatedResponse(article=ArticleResponse.model_validate(article))
