"""Note ORM — a titled text entry, optionally linked to one category.

Invariants:
    - created_at is set once at insert (server clock, UTC) and never updated
    - category_id is nullable; deleting the category sets it to NULL (no cascade delete)
    - is_favorite defaults to False

Design Decisions:
    - ondelete="SET NULL": an enforced FK cannot dangle, and deleting the
      category must not take its notes with it
    - Index on category_id: the list endpoint filters by it
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from notebox.db.base import Base


class Note(Base):
    """Note entity."""
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    is_favorite: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
