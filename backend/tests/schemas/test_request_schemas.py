"""Request Schemas — strict typing on PATCH and POST bodies."""

import pytest
from pydantic import ValidationError

from newsdesk.schemas.article import ArticleVoteUpdate
from newsdesk.schemas.comment import CommentCreate, CreatedCommentResponse


@pytest.mark.parametrize("value", [1, -100, 0])
def test_vote_update_accepts_ints(value):
    assert ArticleVoteUpdate(inc_votes=value).inc_votes == value


@pytest.mark.parametrize("value", ["1", 1.5, True, None])
def test_vote_update_rejects_non_ints(value):
    with pytest.raises(ValidationError):
        ArticleVoteUpdate.model_validate({"inc_votes": value})


def test_vote_update_requires_field():
    with pytest.raises(ValidationError) as exc_info:
        ArticleVoteUpdate.model_validate({})
    assert exc_info.value.errors()[0]["type"] == "missing"


def test_comment_create_ignores_extra_keys():
    comment = CommentCreate.model_validate(
        {"username": "lurker", "body": "hi", "votes": 99},
    )
    assert comment.model_dump() == {"username": "lurker", "body": "hi"}


@pytest.mark.parametrize("payload", [
    {"username": 5, "body": "hi"},
    {"username": "lurker", "body": ["hi"]},
])
def test_comment_create_rejects_non_strings(payload):
    with pytest.raises(ValidationError):
        CommentCreate.model_validate(payload)


def test_created_comment_serializes_with_camel_case_key():
    payload = {
        "comment_id": 19, "body": "hi", "author": "lurker", "article_id": 1,
        "votes": 0, "created_at": "2024-01-01T00:00:00Z",
    }
    response = CreatedCommentResponse(created_comment=payload)
    assert set(response.model_dump(by_alias=True)) == {"createdComment"}
