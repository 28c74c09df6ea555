"""Comments Route — list/create under an article, delete by id.

Invariants:
    - An empty comment list triggers one existence check so "no comments"
      (200 []) is distinguishable from "no article" (404)
    - Unknown article or unknown username on create both surface as
      RELATED_RESOURCE_MISSING from the store's FK constraints
    - DELETE responds 204 with no body
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.params import ArticleIdPath, CommentIdPath
from newsdesk.core.domain_types import ArticleId, CommentId, Username
from newsdesk.core.errors import ResourceNotFoundError
from newsdesk.infrastructure.database import get_db
from newsdesk.repositories.articles import article_exists
from newsdesk.repositories.comments import (
    delete_comment_by_id, insert_comment, select_comments_by_article_id,
)
from newsdesk.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CreatedCommentResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["comments"])


@router.get(
    "/articles/{article_id}/comments", response_model=CommentListResponse,
)
async def get_comments_by_article_id(
    article_id: ArticleIdPath, db: AsyncSession = Depends(get_db),
):
    """Serves an array of comments for the given article, newest first."""
    comments = await select_comments_by_article_id(db, ArticleId(article_id))
    if not comments and not await article_exists(db, ArticleId(article_id)):
        raise ResourceNotFoundError("Article", article_id)
    return CommentListResponse(
        comments=[CommentResponse.model_validate(c) for c in comments],
    )


@router.post(
    "/articles/{article_id}/comments",
    response_model=CreatedCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment_to_article_id(
    article_id: ArticleIdPath,
    comment: CommentCreate,
    db: AsyncSession = Depends(get_db),
):
    """Adds a comment by username to the given article and serves it back."""
    created = await insert_comment(
        db, ArticleId(article_id), Username(comment.username), comment.body,
    )
    logger.info(f"Comment {created.comment_id} created on article {article_id}")
    return CreatedCommentResponse(
        created_comment=CommentResponse.model_validate(created),
    )


@router.delete(
    "/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_comment(
    comment_id: CommentIdPath, db: AsyncSession = Depends(get_db),
):
    """Deletes the given comment. Responds with no content."""
    if not await delete_comment_by_id(db, CommentId(comment_id)):
        raise ResourceNotFoundError("Comment", comment_id)
    logger.info(f"Comment {comment_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
