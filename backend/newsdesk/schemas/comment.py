"""Comment Schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """POST body — both fields required, both must be JSON strings."""
    username: str = Field(strict=True)
    body: str = Field(strict=True)


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comment_id: int
    body: str
    author: str
    article_id: int
    votes: int
    created_at: datetime


class CommentListResponse(BaseModel):
    comments: list[CommentResponse]


class CreatedCommentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    created_comment: CommentResponse = Field(alias="createdComment")
