"""Article List Queries — validates sort/order/topic query-string input.

Invariants:
    - ARTICLE_SORT_COLUMNS is the single allow-list for sort_by
    - build_article_list_query is PURE: raises on bad input, never touches the store
    - order is compared case-insensitively ("ASC" == "asc")
"""

from dataclasses import dataclass

from newsdesk.core.domain_types import SortOrder, TopicSlug
from newsdesk.core.errors import InvalidOrderQueryError, InvalidSortQueryError


ARTICLE_SORT_COLUMNS: frozenset[str] = frozenset({
    "article_id",
    "title",
    "topic",
    "author",
    "created_at",
    "votes",
    "comment_count",
})
DEFAULT_SORT_COLUMN: str = "created_at"
DEFAULT_SORT_ORDER: SortOrder = SortOrder.DESC


@dataclass(frozen=True)
class ArticleListQuery:
    """Validated filter and sort for GET /api/articles."""
    sort_by: str = DEFAULT_SORT_COLUMN
    order: SortOrder = DEFAULT_SORT_ORDER
    topic: TopicSlug | None = None


def build_article_list_query(
    sort_by: str | None = None,
    order: str | None = None,
    topic: str | None = None,
) -> ArticleListQuery:
    """Validate raw query-string values. None means "not supplied"."""
    if sort_by is None:
        sort_by = DEFAULT_SORT_COLUMN
    elif sort_by not in ARTICLE_SORT_COLUMNS:
        raise InvalidSortQueryError(sort_by)

    if order is None:
        direction = DEFAULT_SORT_ORDER
    else:
        try:
            direction = SortOrder(order.lower())
        except ValueError:
            raise InvalidOrderQueryError(order) from None

    return ArticleListQuery(
        sort_by=sort_by,
        order=direction,
        topic=TopicSlug(topic) if topic is not None else None,
    )
