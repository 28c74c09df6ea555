"""Comment ORM — a reader response attached to one article.

Invariants:
    - article_id and author are FKs; an insert naming a missing article or
      user fails with a foreign-key violation
    - votes defaults to 0, created_at is assigned at insert
    - deleting an article cascades to its comments
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from newsdesk.db.base import Base


class Comment(Base):
    """Comment entity."""
    __tablename__ = "comments"

    comment_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    article_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("articles.article_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    votes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
