"""Shared path parameter types.

Non-integer ids fail with int_parsing and ids past the store's INTEGER range
fail with less_than_equal / greater_than_equal; both render as "Invalid input".
"""

from typing import Annotated

from fastapi import Path

from newsdesk.core.domain_types import MAX_ID

ArticleIdPath = Annotated[int, Path(ge=-MAX_ID, le=MAX_ID)]
CommentIdPath = Annotated[int, Path(ge=-MAX_ID, le=MAX_ID)]
