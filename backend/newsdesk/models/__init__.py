"""ORM Models — SQLAlchemy declarative models for topics, users, articles, comments.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete for
      create_all() and alembic autogenerate
"""

from newsdesk.models.topic import Topic  # noqa: F401
from newsdesk.models.user import User  # noqa: F401
from newsdesk.models.article import Article  # noqa: F401
from newsdesk.models.comment import Comment  # noqa: F401
