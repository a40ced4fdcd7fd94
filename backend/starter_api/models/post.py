"""Post ORM — placeholder entity scaffolded for future feature modules.

Invariants:
    - id is an autoincrement integer primary key
    - title is required; body is optional
    - published defaults to False

Design Decisions:
    - No relationships or lifecycle logic: the entity only anchors the schema
      and migration setup
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from starter_api.db.base import Base


class Post(Base):
    """Post entity."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
