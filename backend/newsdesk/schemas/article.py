"""Article Schemas — list items, single article, vote update.

Invariants:
    - ArticleVoteUpdate.inc_votes is a strict int within the store's INTEGER
      range: "1", 1.5, true and 2**31 are rejected
    - List items omit body; the single-article view includes it
    - comment_count is only present on reads that joined comments
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from newsdesk.core.domain_types import MAX_ID
from newsdesk.models.article import Article


class ArticleVoteUpdate(BaseModel):
    """PATCH body — a signed vote delta."""
    inc_votes: int = Field(strict=True, ge=-MAX_ID, le=MAX_ID)


class ArticleSummary(BaseModel):
    """Article as it appears in GET /api/articles."""
    model_config = ConfigDict(from_attributes=True)

    article_id: int
    title: str
    topic: str
    author: str
    created_at: datetime
    votes: int
    comment_count: int = 0

    @classmethod
    def from_row(cls, article: Article, comment_count: int) -> "ArticleSummary":
        return cls.model_validate(article).model_copy(
            update={"comment_count": comment_count},
        )


class ArticleResponse(BaseModel):
    """Full article row."""
    model_config = ConfigDict(from_attributes=True)

    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime
    votes: int


class ArticleDetail(ArticleResponse):
    """Full article row plus the joined comment_count."""
    comment_count: int = 0

    @classmethod
    def from_row(cls, article: Article, comment_count: int) -> "ArticleDetail":
        return cls.model_validate(article).model_copy(
            update={"comment_count": comment_count},
        )


class ArticleListResponse(BaseModel):
    articles: list[ArticleSummary]


class ArticleDetailResponse(BaseModel):
    article: ArticleDetail


class ArticleUpdatedResponse(BaseModel):
    article: ArticleResponse
