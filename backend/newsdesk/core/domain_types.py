"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ArticleId and CommentId wrap store-generated integers
    - TopicSlug and Username wrap the textual primary keys
    - Sort direction encoded as an Enum — no raw string matching past validation
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ArticleId = NewType("ArticleId", int)
CommentId = NewType("CommentId", int)
TopicSlug = NewType("TopicSlug", str)
Username = NewType("Username", str)

# Largest value the store's INTEGER id columns accept
MAX_ID: int = 2_147_483_647


# ─── Enums ───────────────────────────────────────────────────────

class SortOrder(str, Enum):
    """Sort direction for list endpoints."""
    ASC = "asc"
    DESC = "desc"
