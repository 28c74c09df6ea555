"""Article ORM — a published piece under one topic by one author.

Invariants:
    - article_id is store-generated and never reassigned
    - topic and author are FKs; the store rejects unknown slugs/usernames
    - votes only change by delta (UPDATE votes = votes + :inc)
    - comment_count is NOT a column — computed at read time by the repository
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from newsdesk.db.base import Base


class Article(Base):
    """Article entity."""
    __tablename__ = "articles"

    article_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    topic: Mapped[str] = mapped_column(
        String(100), ForeignKey("topics.slug"), nullable=False,
    )
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    votes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0",
    )
