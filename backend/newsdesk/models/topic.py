"""Topic ORM — read-only subject category keyed by slug."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from newsdesk.db.base import Base


class Topic(Base):
    __tablename__ = "topics"

    slug: Mapped[str] = mapped_column(String(100), primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
